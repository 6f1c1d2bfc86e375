# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import logging

from uvicorn.logging import DefaultFormatter

# remove all handlers from the root logger
root_logger = logging.getLogger()
while root_logger.hasHandlers():
    root_logger.removeHandler(root_logger.handlers[0])

# level prefix first, origin of the record in brackets
handler = logging.StreamHandler()
handler.setFormatter(DefaultFormatter(fmt="%(levelprefix)s %(message)s (%(name)s:%(lineno)d)"))

root_logger.addHandler(handler)
root_logger.setLevel(logging.INFO)

# Disable httpx INFO logging by setting the log level to WARNING
httpx_logger = logging.getLogger("httpx")
httpx_logger.setLevel(logging.WARNING)
