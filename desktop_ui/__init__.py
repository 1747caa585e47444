"""Qt desktop view for the matching game."""
