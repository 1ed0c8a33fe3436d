# ---- Display & timing ----
WINDOW_W = 960
WINDOW_H = 540
FPS = 60

# ---- Tiles ----
TILE = 16            # base pixel size of a tile
SCALE = 3            # zoom factor for the chunky handheld look
TILE_PX = TILE * SCALE

# ---- Player ----
STEP_DURATION_MS = 110   # lower for a faster walk

# ---- Content ----
CONTENT_FILE = "overworld.yaml"

# ---- Window ----
CAPTION = "Tile Walk"
