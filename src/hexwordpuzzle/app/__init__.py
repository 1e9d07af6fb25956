"""The Qt desktop host."""
