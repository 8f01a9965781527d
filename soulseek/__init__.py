"""Message encoders, decoders and framed connections for the Soulseek protocol."""

__version__ = "0.1.0"