"""
constants.py: Centralized configuration for the simulation, spawning and display.
"""

# -------- Display Config --------
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 400
FPS = 60                        # One simulation tick per rendered frame
GROUND_LINE_Y = CANVAS_HEIGHT - 80   # Road line obstacles stand on

# -------- Vehicle Config --------
VEHICLE_X = 50                  # Fixed motorcycle X position
VEHICLE_WIDTH = 80
VEHICLE_NORMAL_HEIGHT = 60
VEHICLE_DUCK_HEIGHT = 40
VEHICLE_GROUND_Y = GROUND_LINE_Y - VEHICLE_NORMAL_HEIGHT
GRAVITY = 0.8                   # Added to velocity every tick (pixels/tick^2)
JUMP_POWER = -15.0              # Instantaneous velocity on jump (pixels/tick)
LANDING_ANIMATION_FRAMES = 8
MOUNT_CLEARANCE = 2             # Gap kept between vehicle and a ridden obstacle

# -------- Hitbox Config --------
HITBOX_SIZE_RATIO = 0.7
NORMAL_HITBOX_OFFSET = (1, 4)   # (x, y) offsets inside the normal sprite box
DUCK_HITBOX_OFFSET = (1, 3)     # Duck sprite carries its weight lower
MOUNT_TOLERANCE_ABOVE = 5       # Hitbox bottom may be this far above the top edge
MOUNT_TOLERANCE_BELOW = 10      # ... or this far below it

# -------- Speed & Difficulty Config --------
INITIAL_SPEED = 6.0
SPEED_INCREMENT = 0.5
SPEED_INCREASE_INTERVAL = 300   # Frames between speed bumps
OBSTACLE_INTERVAL_DECREASE_RATE = 0.5
DAY_NIGHT_CYCLE_FRAMES = 900

# -------- Ground Obstacle Config --------
OBSTACLE_MIN_INTERVAL = 60
OBSTACLE_MAX_INTERVAL = 120
OBSTACLE_MIN_INTERVAL_CAP = 40
GROUND_INTERVAL_MIN_SPACING = 30
GROUND_FIRST_SPAWN_FRAME = 2 * OBSTACLE_MAX_INTERVAL
GROUND_OBSTACLE_POINTS = 50
MOUNTABLE_OBSTACLE_MIN_SCORE = 250

# -------- Flying Obstacle Config --------
FLYING_OBSTACLE_MIN_INTERVAL = 100
FLYING_OBSTACLE_MAX_INTERVAL = 200
FLYING_INTERVAL_MIN_CAP = 60
FLYING_INTERVAL_MIN_SPACING = 50
FLYING_OBSTACLE_MIN_SCORE = 100
FLYING_FIRST_SPAWN_FRAME = FLYING_OBSTACLE_MAX_INTERVAL + FLYING_OBSTACLE_MIN_SCORE
FLYING_OBSTACLE_POINTS = 75
FLYING_OBSTACLE_SPEED_MULTIPLIER = 1.2
FLYING_OBSTACLE_WIDTH = 45
FLYING_OBSTACLE_HEIGHT = 30
FLYING_HEIGHT_OFFSETS = (-75, -95, -115)   # Top edge relative to GROUND_LINE_Y
WING_FLAP_FRAME_INTERVAL = 10

# -------- Spawn Fairness Config --------
SAFE_DISTANCE = 300             # Other class must be this far from the right edge
OBSTACLE_RETRY_DELAY = 20       # Frames to wait after a suppressed spawn

# -------- Scoring & Effects --------
SURVIVAL_POINT_INTERVAL = 5     # One point every N frames survived
PARTICLE_SPAWN_INTERVAL = 5
PARTICLE_LIFE = 20
PARTICLE_GRAVITY = 0.1
DUST_COLOR = (194, 178, 128)
COLLISION_FLASH_DURATION = 10

# -------- Input Config --------
SWIPE_DUCK_THRESHOLD = 30       # Downward swipe distance that means "duck"

# -------- Persistence Config --------
DB_FILE = "moto_runner.db"
HIGH_SCORE_KEY = "motorcycleHighScore"

# -------- Debug --------
DEBUG_MODE = False              # Draw hitboxes (toggle in game with F3)
