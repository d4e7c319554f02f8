import logging
import sys
import time

from clip_solver.clipboard_reader import ClipboardReader, PyperclipReader
from clip_solver.completion_client import CompletionProvider, OpenAICompletionClient
from clip_solver.config import POLL_INTERVAL, load_config
from clip_solver.exceptions import ClipboardAccessError, CompletionError, ConfigError

logger = logging.getLogger("clipboard_monitor")


class ClipboardSession:
    """Polls a clipboard and sends each new value to a completion provider.

    Only the most recent value is remembered, so text that comes back after
    something else was copied is sent again.
    """

    def __init__(self, reader: ClipboardReader, provider: CompletionProvider, api_key: str,
                 interval: float = POLL_INTERVAL, sleep=None):
        self.reader = reader
        self.provider = provider
        self.api_key = api_key
        self.interval = interval
        self.sleep = sleep or time.sleep
        self.last_text = ""

    def poll_once(self) -> bool:
        """Check the clipboard once. Returns True if new text was handled.

        ClipboardAccessError is not caught here.
        """
        text = self.reader.read()
        if text == self.last_text:
            return False

        logger.info(f"New clipboard text detected: {text}")
        try:
            answer = self.provider.complete(text, self.api_key)
        except CompletionError as e:
            logger.error(f"Error sending to OpenAI: {e}")
        else:
            print(f"Response from OpenAI: {answer}")
        # Advance even on failure so a failed prompt isn't resent
        self.last_text = text
        return True

    def run(self, max_iterations=None):
        logger.info("Starting clipboard monitoring...")
        iterations = 0
        while max_iterations is None or iterations < max_iterations:
            self.poll_once()
            self.sleep(self.interval)
            iterations += 1


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        config = load_config()
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    client = OpenAICompletionClient(
        url=config.completion_url,
        model=config.model,
        system_prompt=config.system_prompt,
    )
    session = ClipboardSession(PyperclipReader(), client, config.api_key, interval=config.poll_interval)

    try:
        session.run()
    except ClipboardAccessError as e:
        logger.critical(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Clipboard monitoring stopped.")


if __name__ == "__main__":
    main()
