# ==============================================================================
# Файл: poisson_sampler/core/constants.py
# Назначение: Константы алгоритма выборки (попытки, окрестность сетки).
# ==============================================================================
from __future__ import annotations
import math

# Сколько кандидатов пробуем вокруг активной точки, прежде чем её "списать"
MAX_ATTEMPTS = 30

# Размер клетки = radius / sqrt(2): в одной клетке не может быть двух точек
CELL_SIZE_FACTOR = 1.0 / math.sqrt(2.0)

# Полуширина окрестности поиска в клетках. При cell = r/sqrt(2)
# любая точка ближе r лежит не дальше 2 клеток по каждой оси.
NEIGHBOUR_CELLS = 2

# Сколько раз перевыбираем стартовую точку, если она легла на границу
SEED_RESAMPLE_LIMIT = 16

TAU = 2.0 * math.pi

# Состояния алгоритма
STATE_NOT_STARTED = "not_started"
STATE_ACTIVE = "active"
STATE_EXHAUSTED = "exhausted"
