import logging
from typing import Callable, Optional

from ..constants.constants import *
from ..models.analysis_models import AnalysisOutcome, AnalysisSource
from ..models.sequence_models import SequenceValidation
from ..prompts.prompt_manager import PromptManager
from . import fallback_templates as templates
from .fallback_generator import FallbackGenerator
from .llm_factory import GeminiAPI, LLMError, create_llm
from .response_parser import MalformedResponseError, parse_analysis_response

logger = logging.getLogger(__name__)


class InvalidSequenceError(ValueError):
    pass


class SequenceAnalyzer:
    def __init__(
        self,
        llm_factory: Callable[[Optional[str]], GeminiAPI] = create_llm,
        fallback_generator: Optional[FallbackGenerator] = None,
    ) -> None:
        self.llm_factory = llm_factory
        self.prompt_manager = PromptManager()
        self.fallback_generator = fallback_generator or FallbackGenerator()

    def analyze(self, validation: SequenceValidation, api_key: Optional[str]) -> AnalysisOutcome:
        if not validation.is_valid:
            raise InvalidSequenceError(
                f"Refusing to analyze an invalid sequence: {validation.error or UNKNOWN_ERROR}"
            )

        sequence = validation.cleaned_sequence

        if not api_key:
            return self.fallback_generator.generate(sequence, templates.MISSING_KEY_REASON)

        try:
            llm = self.llm_factory(api_key)
            prompt = self.prompt_manager.format_analysis_prompt(validation)
            logger.info(f"Requesting model analysis for {validation.length:,} bp sequence")
            text = llm.generate(prompt)
            predictions, target_genes, hypotheses = parse_analysis_response(text)
        except (LLMError, MalformedResponseError) as e:
            logger.error(f"Model analysis failed: {e}")
            return self.fallback_generator.generate(sequence, str(e))

        return AnalysisOutcome(
            source=AnalysisSource.MODEL,
            predictions=predictions,
            target_genes=target_genes,
            hypotheses=hypotheses,
        )
