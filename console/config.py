# console/config.py
"""
Central configuration for the cube console.
"""

CONFIG = {
    "seed": 42,
    "scramble_length": 25,
    "check_trials": 200,
    "progress": True,
    "log_path": "move_log.json",
    "prompt": "MOVES > ",
}

# Color of each face letter for renderers (RGB, 0-255).
FACE_COLORS = {
    "U": (255, 255, 255),  # white
    "R": (255, 0, 0),      # red
    "F": (0, 255, 0),      # green
    "D": (255, 255, 0),    # yellow
    "L": (255, 102, 0),    # orange
    "B": (0, 0, 255),      # blue
}
