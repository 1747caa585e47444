"""Qt item models exposed to QML."""
