import pytest

import pathlog


@pytest.fixture
def restore_default_logger():
    config = pathlog.default_logger.config
    saved = (list(config.root_path_segments), config.colored_log, config.log_debug_level)
    stack = pathlog.default_logger.resolver.stack
    yield pathlog.default_logger
    config.root_path_segments, config.colored_log, config.log_debug_level = saved
    pathlog.default_logger.resolver.stack = stack
