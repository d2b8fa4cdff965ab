"""
Application Layer

Use cases that drive the voting domain from gateway events.

Structure:
- commands/: Start, cast and retract pin votes
- services/: Pinning behind a per-channel cooldown
- interfaces/: Port interfaces for infrastructure adapters
"""
