# randints/core/reducer.py
import logging

def apply_number(state, value: int):
    state.set_current(value)
    state.add_log(f"drew {value}")
    logging.debug(f"[reducer] current={value} draws={state.draws}")
