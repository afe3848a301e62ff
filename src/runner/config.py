# --- Display ---
WIDTH = 960
HEIGHT = 540
FPS = 60
MAX_FRAME_DT = 1.0 / 30.0   # clamp stalls (tab switch, window drag)

# --- World / Physics ---
GRAVITY = 2400.0            # px/s^2, pulls down
JUMP_VY = -980.0            # vy set by a jump (px/s)
GROUND_Y = HEIGHT - 90      # top of the ground band
SPAWN_X = WIDTH + 40        # new entities appear just past the right edge
CULL_X = -50                # entities whose right edge passes this are dropped

# --- Speed ramp ---
SPEED_BASE = 420.0          # scroll speed at t=0 (px/s)
SPEED_RAMP = 6.0            # px/s gained per second survived
SPEED_MAX = 760.0
SCORE_PER_S = 10.0
SHAKE_ON_HIT = 12.0
SHAKE_DECAY = 0.9           # per tick

# --- Player ---
PLAYER_X = 140
PLAYER_W = 80
PLAYER_H = 120
COYOTE_S = 0.12             # grace after leaving the ground
JUMP_BUFFER_S = 0.12        # grace before landing
RUN_FRAME_S = 0.09
RUN_FRAMES = 7

# --- Spawning ---
ENEMY_FIRST_S = 1.2
ENEMY_MIN_S = 1.1
ENEMY_MAX_S = 1.8
ENEMY_H = 100
ENEMY_SINK = 8              # enemies sit slightly into the ground
PLATFORM_FIRST_S = 2.4
PLATFORM_MIN_S = 2.4
PLATFORM_MAX_S = 3.4
PLATFORM_WIDTHS = (120, 160, 200)
PLATFORM_H = 26
PLATFORM_TOP_MIN = GROUND_Y - 220
PLATFORM_TOP_MAX = GROUND_Y - 120

# --- Hitboxes (fractions of the sprite box) ---
PLAYER_HIT_INSET = (0.2, 0.1)
PLAYER_HIT_SCALE = (0.6, 0.85)
ENEMY_HIT_INSET = (0.15, 0.15)
ENEMY_HIT_SCALE = (0.7, 0.7)

# --- Assets ---
ASSET_DIR_DEFAULT = "assets"
IDLE_FILE = "idle.png"
JUMP_FILE = "jump.png"
FALL_FILE = "fall.png"
RUN_FILES = tuple(f"run{i + 1}.png" for i in range(RUN_FRAMES))
ENEMY_FILES = ("enemy1.png", "enemy2.png", "enemy3.png")

# --- Status line ---
STATUS_LOADING = "Loading..."
STATUS_PLAYING = "Space / Tap to jump"
STATUS_OVER = "Game Over - Press R"
STATUS_LOAD_ERROR = "Error loading images"

SEED_DEFAULT = None         # None = fresh random layout each launch

# --- Colors (RGB) ---
COLOR_SKY_TOP = (125, 211, 252)
COLOR_SKY_BOTTOM = (224, 242, 254)
COLOR_MOUNTAIN = (203, 213, 245)
COLOR_GROUND = (229, 231, 235)
COLOR_PLAT = (248, 250, 252)
COLOR_PLAT_LIP = (203, 213, 225)
COLOR_HUD = (15, 23, 42)
COLOR_OVERLAY = (0, 0, 0, 128)
COLOR_FG = (255, 255, 255)
COLOR_PLAYER_BOX = (56, 189, 248)   # headless placeholders
COLOR_ENEMY_BOX = (244, 63, 94)
