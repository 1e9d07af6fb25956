"""
The CONTROLLER layer turns host events (resizes, pointer samples) into
model updates and selection callbacks. Still free of Qt.
"""
