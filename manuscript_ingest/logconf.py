# manuscript_ingest/logconf.py
import logging, sys, pathlib, datetime

FORMAT = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"


def init(level: str = "INFO", log_dir: str | pathlib.Path | None = None):
    """Configure root logger once per run."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        log_dir = pathlib.Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                log_dir / f"import_{datetime.date.today()}.log", encoding="utf-8"
            )
        )
    logging.basicConfig(
        level=getattr(logging, level.upper(), 20),
        format=FORMAT,
        handlers=handlers,
        force=True,
    )


class BundleLogger(logging.LoggerAdapter):
    """Prefix every record with the folder the bundle came from."""

    def process(self, msg, kwargs):
        return f"[{self.extra['bundle']}] {msg}", kwargs


def for_bundle(folder_name: str, name: str = "manuscript_ingest") -> BundleLogger:
    return BundleLogger(logging.getLogger(name), {"bundle": folder_name})
