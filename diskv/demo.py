#!/usr/bin/env python3
"""
diskv Demo Entry Point

Spawns worker threads that share one KeyValueStore. Each worker writes its
own keys, reads them back, then deletes them.

Usage:
    python -m diskv.demo                          # Default settings
    python -m diskv.demo --base-path /tmp/diskv   # Custom data directory
    python -m diskv.demo --cache-size-max 64      # Small cache, more evictions
    python -m diskv.demo --workers 4 --keys 100
    python -m diskv.demo --debug                  # Log cache hits/misses

Environment Variables:
    DISKV_BASE_PATH        - Data directory
    DISKV_CACHE_SIZE_MAX   - Cache ceiling in bytes
    DISKV_WORKERS          - Number of worker threads
    DISKV_KEYS_PER_WORKER  - Keys written by each worker
    DISKV_DEBUG            - Enable debug mode (true/false)
    DISKV_LOG_LEVEL        - Log level when not in debug mode
"""

import argparse
import logging
import sys
import threading
from typing import Dict, List, Optional

from .config.settings import Options, settings
from .exceptions import DiskvError
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="diskv: run worker threads against one shared store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--base-path",
        type=str,
        default=settings.BASE_PATH,
        help="Directory to persist values in",
    )

    parser.add_argument(
        "--cache-size-max",
        type=int,
        default=settings.CACHE_SIZE_MAX,
        help="Cache ceiling in bytes",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=settings.WORKERS,
        help="Number of worker threads",
    )

    parser.add_argument(
        "--keys",
        type=int,
        default=settings.KEYS_PER_WORKER,
        help="Keys written by each worker",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def worker(name: str, store: KeyValueStore, count: int) -> None:
    """Put, get, then delete `count` keys owned by this worker."""
    keys = [f"{name}-k{i}" for i in range(count)]

    logger.info(f"writing keys in {name}")
    for key in keys:
        logger.info(f"[{name} put] key: {key}")
        store.put(key, f"value of key {key}".encode())

    logger.info(f"reading keys in {name}")
    for key in keys:
        value = store.get(key)
        if value is None:
            logger.info(f"[{name} get] key: {key}, val: not found")
        else:
            logger.info(f"[{name} get] key: {key}, val: {value.decode(errors='replace')}")

    logger.info(f"deleting keys in {name}")
    for key in keys:
        logger.info(f"[{name} delete] key: {key}")
        store.delete(key)


def run_workers(store: KeyValueStore, workers: int, keys: int) -> Dict[str, BaseException]:
    """
    Run worker threads to completion.

    Args:
        store: The store shared by all workers
        workers: Number of threads
        keys: Keys per worker

    Returns:
        Mapping of worker name -> exception for every worker that failed
    """
    failures: Dict[str, BaseException] = {}
    failures_lock = threading.Lock()

    def run(name: str) -> None:
        try:
            worker(name, store, keys)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            with failures_lock:
                failures[name] = e

    threads = [
        threading.Thread(target=run, args=(f"worker{i + 1}",), name=f"worker{i + 1}")
        for i in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        logger.info(f"{thread.name} finished")

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    try:
        store = KeyValueStore(
            Options(base_path=args.base_path, cache_size_max=args.cache_size_max)
        )
    except (DiskvError, ValueError) as e:
        logger.error(f"failed to create store: {e}")
        return 1

    logger.info("Starting diskv demo")
    logger.info(f"  Base path: {args.base_path}")
    logger.info(f"  Cache size max: {args.cache_size_max}")
    logger.info(f"  Workers: {args.workers}")
    logger.info(f"  Keys per worker: {args.keys}")

    failures = run_workers(store, args.workers, args.keys)

    logger.debug(f"final state:\n{store}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
