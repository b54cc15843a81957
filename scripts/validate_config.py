#!/usr/bin/env python3
"""Configuration validation script.

Usage:
    python scripts/validate_config.py [path/to/copier.yaml]
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from copier_app.config.loader import ConfigLoader  # noqa: E402
from copier_app.config.validation import ConfigValidator  # noqa: E402
from copier_app.errors import ConfigurationError  # noqa: E402


def main():
    """Main validation function."""
    print("🔍 Validating trade copier configuration...")

    config_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_file=config_file)

    try:
        merged = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    issues = ConfigValidator.validate_config(merged)
    if issues:
        print(f"❌ Found {len(issues)} validation errors:")
        for issue in issues:
            print(f"  • {issue.field}: {issue.message} (value: {issue.value})")
        sys.exit(1)

    config = loader.load()
    print(f"✅ Listening on {config.server.host}:{config.server.port}")
    print(f"✅ Log level {config.logging.level.upper()}, JSON={config.logging.format_json}")
    print(f"✅ Signal defaults: side={config.signals.default_side} "
          f"lot={config.signals.default_lot} price={config.signals.default_price}")
    print("\n🎉 Configuration is valid!")
    sys.exit(0)


if __name__ == "__main__":
    main()
