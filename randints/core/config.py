# randints/core/config.py
import os, json
import logging
from dataclasses import dataclass, asdict

DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".randints.json")
SOURCES = ("stream", "notification")

@dataclass
class Config:
    theme: str | None = None
    source: str = "stream"             # "stream" or "notification"
    min_value: int = 1
    max_value: int = 50
    seed: int | None = None
    history_size: int = 10
    log_file: str = "randints.log"
    log_level: str = "INFO"

    @staticmethod
    def load(path: str = DEFAULT_PATH) -> "Config":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception:
            data = {}
        if not isinstance(data, dict):
            data = {}
        source = str(data.get("source", "stream"))
        seed = data.get("seed")
        return Config(
            theme=data.get("theme"),
            source=source if source in SOURCES else "stream",
            min_value=int(data.get("min_value", 1)),
            max_value=int(data.get("max_value", 50)),
            seed=int(seed) if seed is not None else None,
            history_size=max(1, int(data.get("history_size", 10))),
            log_file=str(data.get("log_file", "randints.log")),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def save(self, path: str = DEFAULT_PATH) -> None:
        data = asdict(self)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def setup_logging(cfg: Config) -> None:
    """Send application logging to a file; the terminal belongs to the UI."""
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format='%(asctime)s %(levelname)s [%(threadName)s] %(message)s',
        filename=cfg.log_file,
        filemode='w'
    )
