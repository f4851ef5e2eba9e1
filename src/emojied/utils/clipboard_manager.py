# -*- coding: utf-8 -*-
"""
src/emojied/utils/clipboard_manager.py

A simple wrapper utility for interacting with the system clipboard.

This module centralizes clipboard operations, primarily using the 'pyperclip'
library. It provides a function to copy text that reports failure instead of
raising, for environments where a clipboard might not be available.
"""

import pyperclip
import logging

# Set up a logger for this module. The application's entry point should configure the root logger.
logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied, typically a single emoji.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Successfully copied to clipboard: '{text}'")
        return True
    except pyperclip.PyperclipException as e:
        # This can happen on systems without a clipboard (e.g., some Linux servers)
        # or if the necessary copy/paste mechanism is not installed (e.g., xclip/xsel).
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip', 'xsel' or 'wl-clipboard' is installed."
        )
        return False


def read_clipboard() -> str:
    """Returns the current clipboard text, or an empty string if unavailable."""
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to read clipboard: {e}")
        return ""


if __name__ == '__main__':
    # To run, execute `python -m emojied.utils.clipboard_manager` with the package installed.
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    test_string = "🎉"
    print("--- Testing Clipboard Manager ---")
    print(f"Attempting to copy the string: '{test_string}'")

    if copy_to_clipboard(test_string):
        pasted_content = read_clipboard()
        print(f"Verification: Pasted content is '{pasted_content}'")
        if pasted_content == test_string:
            print("✅ Test PASSED: Pasted content matches the original string.")
        else:
            print("❌ Test FAILED: Pasted content does not match.")
    else:
        print("❌ Test FAILED: Copy operation reported failure.")
        print("This may be expected on a system without a GUI or clipboard utility.")

    print("--- Test Complete ---")
