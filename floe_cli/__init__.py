"""
Floe CLI - Penguin/fish game replay viewer

Commands:
- floe show - Board and scores at one turn
- floe replay - Rebuild a whole log and summarize it
- floe browse - Step through a game interactively
"""
