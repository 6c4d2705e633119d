import subprocess

from PIL import Image

from utils.config import config, debug_print

# screencap raw header: width, height, pixel format (+ colorspace on Android 9+)
SCREENCAP_HEADER_SIZE = 16
LEGACY_SCREENCAP_HEADER_SIZE = 12

def load_adb_config():
    """ADB settings from the adb_config section of config.json"""
    return config.get('adb_config', {})

def run_adb_command(command, binary=False):
    """Run ADB command and return result"""
    try:
        adb_config = load_adb_config()
        adb_path = adb_config.get('adb_path', 'adb')
        device_address = adb_config.get('device_address', '')

        # Build the full command
        full_command = [adb_path]
        if device_address:
            full_command.extend(['-s', device_address])
        full_command.extend(command)
        debug_print(f"[DEBUG] Running: {' '.join(full_command)}")

        if binary:
            result = subprocess.run(full_command, capture_output=True, check=True)
            return result.stdout
        else:
            result = subprocess.run(full_command, capture_output=True, text=True, check=True)
            return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        print(f"[ERROR] ADB command failed: {e}")
        return None
    except FileNotFoundError as e:
        print(f"[ERROR] ADB not found: {e}")
        return None

def decode_screencap(raw):
    """Turn raw `screencap` output (header + RGBA pixels) into a PIL image"""
    if len(raw) < LEGACY_SCREENCAP_HEADER_SIZE:
        raise ValueError(f"screencap output too short ({len(raw)} bytes)")

    width = int.from_bytes(raw[0:4], byteorder='little')
    height = int.from_bytes(raw[4:8], byteorder='little')
    pixel_bytes = width * height * 4

    # Older devices write a 12 byte header, newer ones 16
    header_size = SCREENCAP_HEADER_SIZE
    if len(raw) - LEGACY_SCREENCAP_HEADER_SIZE == pixel_bytes:
        header_size = LEGACY_SCREENCAP_HEADER_SIZE

    pixel_data = raw[header_size:header_size + pixel_bytes]
    if len(pixel_data) != pixel_bytes:
        raise ValueError(f"screencap pixel data is {len(pixel_data)} bytes, expected {pixel_bytes} for {width}x{height}")

    return Image.frombytes('RGBA', (width, height), pixel_data).convert('RGB')

def take_screenshot():
    """Take a screenshot using ADB and return PIL Image"""
    # exec-out keeps the binary stream intact (no CRLF translation)
    result = run_adb_command(['exec-out', 'screencap'], binary=True)
    if result is None:
        raise Exception("Failed to take screenshot")
    return decode_screencap(result)

def get_screen_size():
    """Get the screen size of the connected device"""
    result = run_adb_command(['shell', 'wm', 'size'])
    if result:
        # Parse output like "Physical size: 1080x1920"
        if 'Physical size:' in result:
            size_part = result.split('Physical size:')[1].strip().splitlines()[0]
        else:
            size_part = result
        try:
            width, height = map(int, size_part.strip().split('x'))
            return width, height
        except ValueError:
            print(f"[WARNING] Could not parse screen size: {result}")
    # Fallback: take a screenshot and get its size
    screenshot = take_screenshot()
    return screenshot.size
