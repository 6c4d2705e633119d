import time
import subprocess
import sys

from core.execute import show_alert
from core.logic import parse_distance, parse_strategy
from core.state import AppState
from utils.adb_screenshot import run_adb_command, get_screen_size, load_adb_config, take_screenshot
from utils.config import config

def list_connected_devices(adb_path):
    result = subprocess.run([adb_path, 'devices'], capture_output=True, text=True, check=True, timeout=10)
    lines = result.stdout.strip().split('\n')[1:]  # Skip header line
    return [line.split('\t')[0] for line in lines if line.strip() and '\tdevice' in line]

def try_connect(adb_path, device_address):
    """Attempt `adb connect` and report whether any device is now available"""
    if not device_address:
        print("No device address configured in config.json (adb_config.device_address).")
        return False

    print(f"Attempting to connect to: {device_address}")
    try:
        connect_result = subprocess.run(
            [adb_path, 'connect', device_address], capture_output=True, text=True, check=False, timeout=10
        )
        output = (connect_result.stdout or '').strip()
        if output:
            print(output)
        return bool(list_connected_devices(adb_path))
    except (subprocess.TimeoutExpired, subprocess.CalledProcessError, FileNotFoundError) as e:
        print(f"Error during ADB operation: {e}")
        return False

def restart_adb_server(adb_path):
    try:
        subprocess.run([adb_path, 'kill-server'], check=True, capture_output=True, timeout=10)
        time.sleep(1)
        subprocess.run([adb_path, 'start-server'], check=True, capture_output=True, timeout=10)
        time.sleep(2)
        return True
    except (subprocess.TimeoutExpired, subprocess.CalledProcessError, FileNotFoundError) as e:
        print(f"Failed to restart ADB server: {e}")
        return False

def check_adb_connection():
    """Check that a device is reachable, connecting (and restarting the server once) if needed"""
    adb_config = load_adb_config()
    adb_path = adb_config.get('adb_path', 'adb')
    device_address = adb_config.get('device_address', '')

    try:
        devices = list_connected_devices(adb_path)
    except FileNotFoundError:
        print("ADB not found! Please install Android platform-tools and add ADB to your PATH.")
        return False
    except (subprocess.TimeoutExpired, subprocess.CalledProcessError):
        print("ADB command failed! Please ensure ADB is installed and in your system's PATH.")
        return False

    if devices:
        print("Connected devices: " + ", ".join(devices))
        return True

    print("No ADB devices connected!")
    if try_connect(adb_path, device_address):
        return True

    print("\nInitial connection failed. Restarting ADB server and retrying...")
    if restart_adb_server(adb_path) and try_connect(adb_path, device_address):
        return True

    print(f"\nFailed to connect to device at: {device_address}")
    print("Please ensure the emulator/device is running and USB debugging is enabled.")
    return False

def print_device_info():
    width, height = get_screen_size()
    print("Device screen size: " + str(width) + "x" + str(height))

    model = run_adb_command(['shell', 'getprop', 'ro.product.model'])
    if model:
        print("Device model: " + model)

def main():
    print("Uma Stat Calculator - ADB Version!")
    print("=" * 40)

    if not check_adb_connection():
        print("\nCould not establish ADB connection. Exiting.")
        show_alert("ADB connection failed", "Could not connect to the device. Check adb_config in config.json and that USB debugging is enabled.")
        sys.exit(1)

    print_device_info()
    print("=" * 40)

    state = AppState(
        distance=parse_distance(config.get("default_distance", "middle")),
        strategy=parse_strategy(config.get("default_strategy", "front-runner"))
    )
    from core.app import run_app
    run_app(state, take_screenshot, config.get("overlay"))

if __name__ == "__main__":
    main()
