import math

# Screen settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
# Number of vertical strips (rays) across the first-person view
STRIP_COUNT = 200

# Raycasting settings
# Nudge applied past every crossed grid line, and length of the eye ray
EPS = 1e-6
# Half of the field of view (radians); pi/4 gives a 90-degree FOV
FOV_HALF_ANGLE = math.pi / 4
# How columns sample the FOV: "chord" (linear between the boundary
# endpoints) or "angular" (uniform angle steps)
FOV_SAMPLING = "chord"
# Extra traversal steps allowed beyond rows + cols before giving up
MAX_EXTRA_STEPS = 4

# Minimap settings
# Top-left corner of the minimap on screen (pixels)
MINIMAP_POSITION = (10, 10)
# Size of one grid cell on the minimap (pixels)
MINIMAP_CELL_SIZE = 16
# Length of the drawn FOV boundary rays (map units)
MINIMAP_ARM_LENGTH = 1.0
# Line widths and marker radius in map units
GRID_LINE_WIDTH = 0.04
RAY_LINE_WIDTH = 0.02
CAMERA_RADIUS = 0.2
TRACE_RADIUS = 0.1

# Player settings
# Distance moved per key press (map units)
MOVE_STEP = 0.25
# Rotation per key press (radians)
ROT_STEP = math.pi / 32

# Colors
BACKGROUND_COLOR = "#181818"
MINIMAP_BACKGROUND = "#101010"
GRID_LINE_COLOR = "#303030"
CAMERA_COLOR = "magenta"
FOV_COLOR = "magenta"
RAY_COLOR = "yellow"
TRACE_COLOR = "blue"

# Level settings
# Level file: JSON definition of the scene grid (located in raycaster/)
LEVEL_FILE = "levels/default.json"
# Camera start used when the level does not define one
CAMERA_START = (3.5, 3.5)
# Camera start heading in degrees, used when the level does not define one
CAMERA_ANGLE = 0.0
