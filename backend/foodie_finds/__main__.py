"""Run the API server: python -m foodie_finds"""

from foodie_finds.main import run

run()
