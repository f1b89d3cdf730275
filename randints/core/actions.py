# randints/core/actions.py
import logging

def draw_next(state, viewmodel):
    """Producer side of the Next button. Never raises into the UI."""
    try:
        return viewmodel.next()
    except Exception as e:
        logging.error(f"draw_next failed: {e!r}", exc_info=True)
        state.add_log(f"[next] error: {e!r}")
        return None
