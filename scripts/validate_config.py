#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fabcalc_app.config.loader import ConfigLoader
from fabcalc_app.config.validation import ConfigIssue, ConfigValidator


def validate_account_config(loader: ConfigLoader, account_id: str) -> list[ConfigIssue]:
    """Validate the merged configuration of one account."""
    config = loader.merge_config(account_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating fabcalc configuration...")

    loader = ConfigLoader.create()

    # Every configured account, plus one that falls back to the defaults
    account_ids = list(loader.load_accounts()) + ["unknown-account"]

    all_valid = True

    for account_id in account_ids:
        print(f"\n📊 Validating {account_id}...")

        try:
            issues = validate_account_config(loader, account_id)

            if issues:
                print(f"❌ Found {len(issues)} validation issues:")
                for issue in issues:
                    print(f"  • {issue.field}: {issue.message} (value: {issue.value})")
                all_valid = False
            else:
                print(f"✅ {account_id} configuration is valid")

        except Exception as e:
            print(f"❌ Error validating {account_id}: {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
