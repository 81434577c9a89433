"""
Manipulator Service - Business logic for image manipulation jobs.

Translates a job's parameter bag into a sequence of processor calls:
crop or resize first, then grayscale.
"""

import logging
from typing import Optional

from core.constants import MetricNames
from core.enums import FitMode
from core.metrics import MetricsRecorder, NullMetrics, track_duration
from core.processor import Processor
from core.utils.enum_converter import convert_enums_to_strings
from schemas import ProcessOptions, ProcessSpec

logger = logging.getLogger(__name__)


class Manipulator:
    """
    Service running manipulation jobs against a processor.

    Each call is independent; the service holds no per-job state.
    """

    def __init__(self, processor: Processor, metrics: Optional[MetricsRecorder] = None):
        """
        Initialize manipulator.

        Args:
            processor: Processor performing the image transforms
            metrics: Sink for per-job step durations (discarded if None)
        """
        self.processor = processor
        self.metrics = metrics or NullMetrics()

    def process(self, spec: ProcessSpec) -> bytes:
        """
        Run a manipulation job.

        Steps, in order:
        - fit=crop: cover-resize and crop to w x h around the crop anchor
        - no fit and w or h given: resize within w x h
        - mono=000000: grayscale (independent of the above)

        Args:
            spec: Job specification

        Returns:
            Processed image bytes, or the input bytes if no step applies

        Raises:
            ImageProcessingError: If any step fails; later steps do not run
        """
        options = ProcessOptions.from_params(spec.params)
        data = spec.image_data

        if options.fit_mode == FitMode.CROP:
            with track_duration(self.metrics, MetricNames.CROP, spec.scope):
                data = self.processor.crop(
                    data, options.width, options.height, options.crop_point
                )
        elif options.fit_mode == FitMode.NONE and options.has_dimensions:
            with track_duration(self.metrics, MetricNames.RESIZE, spec.scope):
                data = self.processor.resize(data, options.width, options.height)

        if options.grayscale:
            with track_duration(self.metrics, MetricNames.GRAYSCALE, spec.scope):
                data = self.processor.grayscale(data)

        if logger.isEnabledFor(logging.DEBUG):
            summary = convert_enums_to_strings(options.model_dump())
            logger.debug(
                f"Processed job [{spec.scope or '-'}]: {summary} "
                f"{len(spec.image_data)} -> {len(data)} bytes"
            )
        return data
