"""packstack - Generate idempotent, self-verifying install scripts.

Pick packages for a target operating system and get a single script that
installs them with the platform's native package manager.
"""

__version__ = "0.1.0"
