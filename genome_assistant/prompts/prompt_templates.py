from ..constants.constants import *

SEQUENCE_PLACEHOLDER = "{sequence}"
LENGTH_PLACEHOLDER = "{length}"
GC_CONTENT_PLACEHOLDER = "{gc_content}"
ANALYSIS_CONTEXT_PLACEHOLDER = "{analysis_context}"
CONVERSATION_HISTORY_PLACEHOLDER = "{conversation_history}"
USER_MESSAGE_PLACEHOLDER = "{user_message}"
PREDICTIONS_PLACEHOLDER = "{predictions}"
GENES_PLACEHOLDER = "{genes}"
SEQUENCE_TYPE_PLACEHOLDER = "{sequence_type}"

JSON_ONLY_INSTRUCTION = "Return ONLY valid JSON, no markdown formatting or code blocks."
CONCISE_RESPONSE = (
    "Keep responses concise and focused. Only elaborate if the user asks for more detail."
)

ANALYSIS_JSON_SCHEMA = """{{
  "sequence_stats": {{
    "length": <number>,
    "gc_content": <percentage as number>
  }},
  "predictions": [
    {{
      "name": "<function name>",
      "confidence": <0-100>,
      "category": "<Gene Regulation|RNA Processing|Chromatin Structure|Epigenetic Regulation>",
      "mechanism": "<detailed 3-4 sentence explanation>",
      "evidence": ["<evidence 1>", "<evidence 2>", "<evidence 3>"],
      "diseases": ["<disease 1>", "<disease 2>"]
    }}
  ],
  "regulatory_network": {{
    "genes": ["<gene1>", "<gene2>", "<gene3>", "<gene4>", "<gene5>"],
    "relationships": [
      {{"from": "DNA_SEQUENCE", "to": "<gene>", "type": "activation|repression", "strength": <0-1>}}
    ]
  }},
  "hypotheses": [
    {{
      "statement": "<hypothesis>",
      "method": "<experimental approach>",
      "expected_outcome": "<outcome>",
      "resources": "<what's needed>",
      "timeline": "<time estimate>"
    }}
  ]
}}"""


class PromptTemplates:

    @staticmethod
    def get_analysis_prompt() -> str:
        return f"""You are a genomics expert. Analyze this DNA sequence and predict its functions.

DNA Sequence: {SEQUENCE_PLACEHOLDER}

Precomputed statistics: length {LENGTH_PLACEHOLDER} bp, GC content {GC_CONTENT_PLACEHOLDER}%.

Provide a detailed analysis in JSON format:
{ANALYSIS_JSON_SCHEMA}

{JSON_ONLY_INSTRUCTION}"""

    @staticmethod
    def get_chat_prompt() -> str:
        return f"""You are the AlphaGenome research assistant, helping a scientist interpret a non-coding DNA sequence they have analyzed.

{ANALYSIS_CONTEXT_PLACEHOLDER}

{CONVERSATION_HISTORY_PLACEHOLDER}

The researcher says: {USER_MESSAGE_PLACEHOLDER}

Reply in 2-3 sentences. Relate the observation to the predicted functions and target genes when relevant, and suggest a concrete next experiment if one fits.

{CONCISE_RESPONSE}"""

    @staticmethod
    def get_analysis_context_template() -> str:
        return f"""Current analysis:
- Sequence type: {SEQUENCE_TYPE_PLACEHOLDER}
- Top predictions: {PREDICTIONS_PLACEHOLDER}
- Target genes: {GENES_PLACEHOLDER}"""

    @staticmethod
    def get_no_analysis_context() -> str:
        return "No sequence has been analyzed yet. Answer general questions about non-coding DNA."
