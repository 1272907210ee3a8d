"""
Onboarding has no table of its own.

Progress lives on user_profile:
- current_step: int, highest wizard step the user may resume at (10 when complete)
- is_onboarding_complete: bool

The header config is process state, one entry per user, see header.py.
"""
