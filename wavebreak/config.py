"""
Game Configuration
===================
Gameplay constants and command-line runtime options.
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence


# =============================================================================
# PLAYFIELD
# =============================================================================

PLAYFIELD_WIDTH = 800.0
PLAYFIELD_HEIGHT = 600.0

# =============================================================================
# ACTORS
# =============================================================================

PLAYER_RADIUS = 15.0
PLAYER_SPEED = 3.0
PLAYER_HEALTH = 3

ENEMY_RADIUS = 15.0
ENEMY_SPEED = 1.5
ENEMY_HEALTH = 2

# =============================================================================
# WAVES
# =============================================================================

ENEMIES_PER_LEVEL = 5
SPAWN_MIN_DISTANCE = 100.0
MAX_SPAWN_ATTEMPTS = 1000

# =============================================================================
# KEY BINDINGS (names as reported by the input snapshot)
# =============================================================================

KEY_UP = 'w'
KEY_DOWN = 's'
KEY_LEFT = 'a'
KEY_RIGHT = 'd'
KEY_SWITCH_WEAPON = 'q'
KEY_RESTART = 'r'

# =============================================================================
# LOOP
# =============================================================================

TARGET_FPS = 60
MIN_WIDTH = 60
MIN_HEIGHT = 20


@dataclass
class GameConfig:
    """Runtime options for one game process."""
    width: float = PLAYFIELD_WIDTH
    height: float = PLAYFIELD_HEIGHT
    start_level: int = 1
    seed: Optional[int] = None
    fps: int = TARGET_FPS
    log_file: Optional[str] = None
    log_level: str = 'INFO'

    def validate(self) -> 'GameConfig':
        """Raise ValueError on options the simulation cannot run with."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f'playfield must be positive, got {self.width}x{self.height}'
            )
        if self.start_level < 1:
            raise ValueError(f'start level must be >= 1, got {self.start_level}')
        if self.fps <= 0:
            raise ValueError(f'fps must be positive, got {self.fps}')
        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
            raise ValueError(f'unknown log level {self.log_level!r}')
        return self

    @property
    def frame_time(self) -> float:
        return 1.0 / self.fps


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wavebreak',
        description='Top-down arena shooter in your terminal',
    )
    parser.add_argument(
        '--width',
        type=float,
        default=PLAYFIELD_WIDTH,
        help='Playfield width in world units',
    )
    parser.add_argument(
        '--height',
        type=float,
        default=PLAYFIELD_HEIGHT,
        help='Playfield height in world units',
    )
    parser.add_argument(
        '--level',
        type=int,
        default=1,
        help='Starting level',
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible enemy spawns',
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=TARGET_FPS,
        help='Simulation ticks per second',
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Write diagnostics to this file',
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity',
    )
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> GameConfig:
    """Parse command-line arguments into a validated GameConfig."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    config = GameConfig(
        width=args.width,
        height=args.height,
        start_level=args.level,
        seed=args.seed,
        fps=args.fps,
        log_file=args.log_file,
        log_level=args.log_level,
    )
    try:
        return config.validate()
    except ValueError as exc:
        parser.error(str(exc))
