"""Common base class shared by the track decoding components."""

from __future__ import annotations

import logging

from .config import DecoderConfig


class PipelineComponent:
    """Provide shared configuration handling and logging for components."""

    def __init__(self, config: DecoderConfig) -> None:
        """Initialise the component with configuration and a dedicated logger."""

        self.config: DecoderConfig = config
        self.logger: logging.Logger = logging.getLogger(self.__class__.__name__)
