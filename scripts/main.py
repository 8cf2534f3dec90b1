# scripts/main.py

from __future__ import annotations

import logging
from pathlib import Path

from rps_sims.core import SimConfig, run_simulation
from rps_sims.presets.basic import make_controller
from rps_sims.utils.cli import build_parser
from rps_sims.utils.logging_utils import setup_logging

PROJECT_ROOT = Path(__file__).parent.parent

logger = logging.getLogger("rps_sims.main")


def main():
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.log_level, log_file=args.log_file)

    # 1. Config: defaults <- preset <- command line
    base = None
    if args.preset is not None:
        preset_path = Path(args.preset)
        if not preset_path.is_absolute() and not preset_path.exists():
            preset_path = PROJECT_ROOT / "presets" / preset_path
        base = SimConfig.from_preset(preset_path)
    sim_config = SimConfig.from_args(args, base=base)

    # 2. Build and run headless
    controller = make_controller(sim_config)
    log_interval = args.log_interval if args.log_interval is not None else sim_config.tick_rate
    recording = run_simulation(
        controller,
        args.n_steps,
        log_interval=log_interval,
        stop_on_winner=args.stop_on_winner,
    )

    # 3. Report
    final = controller.current_counts()
    logger.info(
        "Finished after %d ticks (%.1f s at %d ticks/s): %s",
        recording.n_ticks,
        recording.n_ticks / sim_config.tick_rate,
        sim_config.tick_rate,
        ", ".join(f"{k.value}={n}" for k, n in final.items()),
    )
    winner = recording.winner()
    if winner is not None:
        logger.info("Winner: %s", winner.value)
    else:
        logger.info("No single winner yet")


if __name__ == "__main__":
    main()
