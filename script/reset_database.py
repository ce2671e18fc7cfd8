#!/usr/bin/env python3
"""
Database Reset Script
Rebuild the schema from the Alembic migrations

Notes:
- Runs `alembic downgrade base` then `alembic upgrade head`
- Does not seed data; run `python -m script.seed_data` afterwards
"""

import subprocess

from src.platform.constant.path import ALEMBIC_INI, BASE_DIR
from src.platform.logging.loguru_io import Logger


def _run_alembic(*args: str) -> None:
    Logger.base.info(f"🔄 Running 'alembic {' '.join(args)}'...")

    result = subprocess.run(
        ['alembic', '-c', str(ALEMBIC_INI), *args],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        Logger.base.error(f'❌ alembic {args[0]} failed (return code: {result.returncode})')
        if result.stderr:
            Logger.base.error(result.stderr.strip())
        raise RuntimeError(f'Alembic {args[0]} failed with return code {result.returncode}')

    if result.stdout:
        Logger.base.info(result.stdout.strip())


def main() -> None:
    _run_alembic('downgrade', 'base')
    _run_alembic('upgrade', 'head')
    Logger.base.info('✅ Database reset completed! Seed with: python -m script.seed_data')


if __name__ == '__main__':
    main()
