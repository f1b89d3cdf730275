# randints/main.py
import asyncio, sys
import logging
from prompt_toolkit.patch_stdout import patch_stdout

from randints.core.state import AppState
from randints.core.bus import NotificationBus
from randints.core.config import Config, setup_logging
from randints.core.reducer import apply_number
from randints.core.viewmodel import build_viewmodel
from randints.ui_ptk.layout import build_layout


async def listen_for_numbers(state, viewmodel, app=None):
    """Display-refresh loop: runs until its task is cancelled."""
    try:
        async for number in viewmodel.numbers:
            try:
                apply_number(state, number)
            except Exception as e:
                logging.error(f"[reducer] error: {e!r}", exc_info=True)
                state.add_log(f"[reducer] error: {e!r}")
            if app is not None:
                app.invalidate()
    except asyncio.CancelledError:
        logging.info("Number listener stopped.")
        return


async def main():
    if sys.platform.startswith("win"):
        try:
            asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())  # type: ignore[attr-defined]
        except Exception:
            pass

    try:
        cfg = Config.load()
    except Exception:
        cfg = Config()
    setup_logging(cfg)
    logging.info("Application starting up.")

    state = AppState(history_size=cfg.history_size)
    bus = NotificationBus()
    try:
        viewmodel = build_viewmodel(cfg, bus)
    except ValueError as e:
        logging.warning(f"Bad range in config ({e}); using defaults.")
        state.add_log(f"[config] {e}; using 1..50")
        cfg.min_value, cfg.max_value = 1, 50
        viewmodel = build_viewmodel(cfg, bus)
    state.add_log(f"source: {viewmodel.source}")

    app = build_layout(state=state, viewmodel=viewmodel, cfg=cfg)
    listener_task = asyncio.create_task(listen_for_numbers(state, viewmodel, app))

    try:
        with patch_stdout():
            await app.run_async()
    except KeyboardInterrupt:
        pass
    finally:
        if not listener_task.done():
            listener_task.cancel()
        await asyncio.gather(listener_task, return_exceptions=True)
        logging.info("Application shut down.")


def run():
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

if __name__ == "__main__":
    run()
