"""Allow `python -m product_api`."""

from product_api.main import run

run()
