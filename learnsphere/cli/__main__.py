"""
Entry point for running the LearnSphere CLI as a module.

Usage:
    python -m learnsphere.cli next-channel
    python -m learnsphere.cli replay universe.json events.jsonl
"""
from .main import main

if __name__ == "__main__":
    main()
