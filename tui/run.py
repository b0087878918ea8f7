"""
Registration form launcher - loads .env before any configuration is read, then starts the TUI.
"""

import dotenv


def main():
    """Console entrypoint; registration.core.config must not be imported before load_dotenv runs."""
    # Load environment variables from .env file first
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    try:
        from tui.main import main as tui_main
    except ImportError as e:
        print(f"❌ Failed to import registration form: {e}")
        print("   Make sure textual is installed: pip install textual")
        return 1

    try:
        tui_main()
    except KeyboardInterrupt:
        print("\nℹ️  Registration form interrupted")
    return 0
