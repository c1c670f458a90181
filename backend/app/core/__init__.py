"""Core — error hierarchy and domain types shared by every layer."""
