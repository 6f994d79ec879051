#!/usr/bin/env python3
"""
Process logger entry point.

Loads the configuration, installs termination signal handling and runs
the sampling loop until its duration budget is spent or it is cancelled.
"""
from typing import Optional, Sequence

from proclog.cli.cli import config_overrides, parse_logger_args
from proclog.config.config_loader import ConfigLoader
from proclog.config.run_config import ConfigError
from proclog.service.cancel.cancellation_signal import CancellationSignal
from proclog.service.cancel.signal_listener import SignalListener, SignalSetupError
from proclog.service.sampler.loop_error import LoopError
from proclog.service.sampler.sampling_loop import SamplingLoop
from proclog.util.log_config import setup_logger

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the process logger.

    Returns:
        Process exit code: 0 on completion, cancellation or a logged
        sampling error; 1 on configuration or signal setup errors
    """
    args = parse_logger_args(argv)

    try:
        loader = ConfigLoader(args.config_dir, env=args.env)
        config = loader.build(config_overrides(args))
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FATAL

    if args.env:
        logger.info(f"Loaded configuration with environment override: {args.env}")
    logger.info(f"Starting process logger with interval: {config.interval_seconds}s, "
                f"output: {config.output_path}, duration: {config.max_duration_seconds}s")

    cancel = CancellationSignal()
    try:
        with SignalListener(cancel):
            summary = SamplingLoop(config, cancel).run()
    except SignalSetupError as e:
        logger.error(str(e))
        return EXIT_FATAL
    except LoopError as e:
        logger.error(f"Process logging interrupted: {e}")
        return EXIT_OK

    logger.info("✓ Process information gathered! "
                f"{summary.ticks} tick(s), {summary.rows_written} row(s) in {summary.elapsed_seconds:.1f}s")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
