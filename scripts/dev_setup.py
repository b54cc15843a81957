#!/usr/bin/env python3
"""Prepare a checkout of the trade copier relay for development.

Installs the Poetry environment, then checks that the relay can actually
come up: the default configuration validates, the console script resolves,
the test suite passes and a Master/Slave copy round-trip succeeds.

Usage:
    python scripts/dev_setup.py [--skip-install]
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent

# (description, argv, required)
STEPS = [
    ("Validate default configuration", ["poetry", "run", "python", "scripts/validate_config.py"], True),
    ("Resolve trade-copier console script", ["poetry", "run", "trade-copier", "--help"], True),
    ("Run test suite", ["poetry", "run", "pytest", "-q"], False),
    ("Run copy round-trip smoke test", ["poetry", "run", "python", "scripts/smoke_test.py"], False),
]


def run_step(description: str, argv: list[str]) -> bool:
    print(f"🔧 {description}...")
    result = subprocess.run(argv, cwd=project_root, capture_output=True, text=True)
    if result.returncode == 0:
        print(f"✅ {description}")
        return True

    print(f"❌ {description} (exit {result.returncode}): {' '.join(argv)}")
    output = (result.stderr or result.stdout).strip()
    if output:
        print(output)
    return False


def main():
    if not (project_root / "pyproject.toml").exists():
        print(f"❌ No pyproject.toml under {project_root}")
        sys.exit(1)

    steps = list(STEPS)
    if "--skip-install" not in sys.argv[1:]:
        steps.insert(0, ("Install relay and test dependencies", ["poetry", "install", "--extras", "test"], True))

    failed = []
    for description, argv, required in steps:
        if run_step(description, argv):
            continue
        if required:
            sys.exit(1)
        failed.append(description)

    if failed:
        print(f"\n⚠️  {len(failed)} check(s) failed: {', '.join(failed)}")
        sys.exit(1)

    print("\n🎉 Relay ready. Start it with: poetry run trade-copier")
    print("   Masters POST to /signal; Slaves poll GET /signal/<consumer_id>")


if __name__ == "__main__":
    main()
