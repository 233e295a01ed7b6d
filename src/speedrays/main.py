"""
Main entry point for SpeedRays.

Opens the pygame window by default. ``--headless`` plays one run with no
input (useful for smoke tests and CI), ``--scores`` prints the high
score table.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from speedrays.config.settings import Settings, get_settings
from speedrays.core.session import GameMode, InputSample, PlayerProfile
from speedrays.engine.loop import ManualFramePump, RunController
from speedrays.utils.score_log import ScoreLog, format_highscores

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="speedrays", description="Race-and-dodge / park-the-car arcade game")
    parser.add_argument("--mode", default="race", help="race or park")
    parser.add_argument("--name", default=None)
    parser.add_argument("--age", default=None)
    parser.add_argument("--avatar", default=None)
    parser.add_argument("--car", default=None, help="sport, muscle or retro")
    parser.add_argument("--color", default=None, help="car color as #rrggbb")
    parser.add_argument("--headless", action="store_true", help="run one idle run without a window")
    parser.add_argument("--max-ticks", type=int, default=60 * 120)
    parser.add_argument("--scores", action="store_true", help="print the top 10 and exit")
    parser.add_argument("--debug", action="store_true")
    return parser


def run_headless(settings: Settings, profile: PlayerProfile, mode: GameMode, max_ticks: int) -> Optional[dict]:
    """Drive one run with no input until it ends or ``max_ticks`` pass."""
    pump = ManualFramePump()
    controller = RunController(
        pump,
        InputSample,
        settings.game,
        scores=ScoreLog(settings.scores_path),
        seed=settings.seed,
    )
    simulation = controller.start(profile, mode)

    frames = 0
    while controller.is_active and frames < max_ticks:
        pump.pump()
        frames += 1

    if simulation.record is None:
        controller.cancel()
        logger.warning(f"Run still going after {frames} ticks, stopping")
        return None
    return simulation.record.to_dict()


async def run_window(settings: Settings, profile: PlayerProfile, mode: GameMode) -> None:
    """Run the desktop window."""
    from speedrays.audio.engine import AudioEngine
    from speedrays.simulator.window import SpeedRaysWindow

    audio = AudioEngine(settings.audio)
    audio.init()

    window = SpeedRaysWindow(settings, profile, mode, audio=audio)
    await window.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.debug or settings.debug)

    if args.scores:
        for line in format_highscores(ScoreLog(settings.scores_path).top()):
            print(line)
        return 0

    profile = PlayerProfile.from_form(args.name, args.age, args.avatar, args.car, args.color)
    mode = GameMode.parse(args.mode)

    if args.headless:
        record = run_headless(settings, profile, mode, args.max_ticks)
        if record is None:
            return 1
        print(json.dumps(record, ensure_ascii=False, indent=2))
        return 0

    try:
        asyncio.run(run_window(settings, profile, mode))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
