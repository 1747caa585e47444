"""Core game logic shared by every UI implementation."""
