"""Run with: python -m greet_rpc"""

from .main import main

main()
