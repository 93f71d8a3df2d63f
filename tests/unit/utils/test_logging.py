"""Tests for logging setup and credential masking."""

import io
import logging
import os
import subprocess
import sys

import pytest

from confluence_blocks.utils.logging import LOGGER_NAME, mask_sensitive, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    def test_configures_level_and_stream(self, restore_root_logger):
        stream = io.StringIO()

        logger = setup_logging(logging.DEBUG, stream)
        logger.debug("hello")

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert "DEBUG - confluence-blocks - hello" in stream.getvalue()

    def test_replaces_root_handlers(self, restore_root_logger):
        setup_logging(logging.INFO, io.StringIO())
        setup_logging(logging.INFO, io.StringIO())

        assert len(logging.getLogger().handlers) == 1

    def test_default_level_filters_debug(self, restore_root_logger):
        stream = io.StringIO()

        logger = setup_logging(stream=stream)
        logger.info("quiet")
        logger.warning("loud")

        assert "quiet" not in stream.getvalue()
        assert "loud" in stream.getvalue()


class TestMaskSensitive:
    def test_masks_secret_values(self):
        assert mask_sensitive("token s3cr3t rejected", ["s3cr3t"]) == "token *** rejected"

    def test_masks_authorization_credentials(self):
        message = "sent Authorization: Basic dXNlcjp0b2tlbg== and Bearer abc.def"

        assert mask_sensitive(message) == "sent Authorization: Basic *** and Bearer ***"

    def test_ignores_empty_secrets(self):
        assert mask_sensitive("nothing to hide", [None, ""]) == "nothing to hide"

    def test_empty_text(self):
        assert mask_sensitive("", ["x"]) == ""


class TestImportSideEffects:
    def test_importing_package_keeps_host_logging(self):
        script = "\n".join(
            [
                "import logging, sys",
                "host_handler = logging.StreamHandler(sys.stderr)",
                "root = logging.getLogger()",
                "root.addHandler(host_handler)",
                "root.setLevel(logging.INFO)",
                "import confluence_blocks",
                "import confluence_blocks.app",
                "assert host_handler in root.handlers, root.handlers",
                "assert len(root.handlers) == 1, root.handlers",
                "assert root.level == logging.INFO, root.level",
            ]
        )
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(sys.path), "MCP_VERBOSE": "true"}

        result = subprocess.run(
            [sys.executable, "-c", script], capture_output=True, text=True, env=env
        )

        assert result.returncode == 0, result.stderr
