"""
Application Layer

Turns user commands into remote calls and writes the results into the
shared application state.

Structure:
- commands/: One immutable command object per user-triggerable action
- services/: The dispatcher, dispatch loop, credential manager and state guard
- interfaces/: Port interfaces for infrastructure adapters
"""
