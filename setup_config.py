#!/usr/bin/env python3
"""
Configuration Setup Script for Uma Stat Calculator

Copies config.example.json to config.json so local settings (capture region,
Tesseract path, ADB device) survive pulling updates from the repository.
"""

import os
import shutil

def copy_example_files(config_files=(('config.example.json', 'config.json'),)):
    """Copy example configuration files to working copies"""

    print("Uma Stat Calculator - Configuration Setup")
    print("=" * 50)

    created = []
    for example_file, target_file in config_files:
        if not os.path.exists(example_file):
            print(f"❌ {example_file} not found!")
        elif os.path.exists(target_file):
            print(f"⚠️  {target_file} already exists. Skipping...")
        else:
            try:
                shutil.copy2(example_file, target_file)
                print(f"✅ Created {target_file} from {example_file}")
                created.append(target_file)
            except OSError as e:
                print(f"❌ Error copying {example_file}: {e}")

    print("\n" + "=" * 50)
    print("Configuration setup complete!")
    print("\nNext steps:")
    print("1. Edit config.json (capture_region, tesseract_cmd, adb_config)")
    print("2. Run the calculator with: python main.py  (or python main_adb.py for a phone/emulator)")
    return created

if __name__ == "__main__":
    copy_example_files()
