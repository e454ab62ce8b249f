"""
Main entry point for the job_ranker package.

Usage:
    python -m job_ranker [command] [options]

See 'python -m job_ranker --help' for available commands.
"""

from job_ranker.cli import main

if __name__ == "__main__":
    main()
