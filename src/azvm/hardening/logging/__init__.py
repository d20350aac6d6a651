#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
"""
azvm.hardening.logging - helper functions for logging in the hardening tools
"""
import logging
import os
import sys

LOGGER = logging.getLogger(__name__)
LOG_FORMAT = "%(asctime)-15s - %(levelname)-7s - %(name)s - %(message)s"


def setup_logging(env_key='STARTING_LOG_LEVEL', default_level='INFO', stream=None) -> None:
    """
    Setup the log level base on the environment variable in `env_key`. Fall back
    to the `default_level` if the key doesn't exist in the environment or if an
    invalid key is presented. Log records go to stderr so that nothing mixes
    with output a caller may be capturing.
    """
    requested_log_level = os.environ.get(env_key) or default_level
    log_level = logging.getLevelName(requested_log_level.strip().upper())

    bad_log_level = None
    if not isinstance(log_level, int):
        bad_log_level = requested_log_level
        log_level = logging.getLevelName(default_level)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=stream or sys.stderr)

    if bad_log_level:
        LOGGER.warning(
            'Log level %r is not valid. Falling back to %s', bad_log_level, default_level
        )
