APP_TITLE = "AlphaGenome Research Assistant"
APP_SUBTITLE = "Non-coding DNA Analysis Platform"
APP_ICON = "🧬"
REPORT_FOOTER_TEXT = "Generated by ncRNA Function Predictor"

# Sequence alphabet
DNA_BASES = ("A", "T", "G", "C")
FASTA_HEADER_MARKER = ">"
RNA_URACIL = "U"
DNA_THYMINE = "T"
ACCEPTED_RESIDUES = ("A", "T", "G", "C", "U")
# Characters dropped silently rather than reported as invalid
UNREPORTED_CHARACTERS = ACCEPTED_RESIDUES + (FASTA_HEADER_MARKER,)

DEFAULT_MIN_SEQUENCE_LENGTH = 50
DEFAULT_MAX_SEQUENCE_LENGTH = 10000
DEFAULT_FORMAT_LINE_LENGTH = 60
SEQUENCE_PREVIEW_LENGTH = 50

NO_VALID_SEQUENCE_ERROR = "No valid DNA sequence found. Please use only A, T, G, C nucleotides."
SEQUENCE_TOO_SHORT_ERROR = "Sequence too short ({length} bp). Minimum {minimum} base pairs required."
SEQUENCE_TOO_LONG_ERROR = "Sequence too long ({length} bp). Maximum {maximum:,} base pairs allowed."

GC_LOW_THRESHOLD = 40.0
GC_HIGH_THRESHOLD = 60.0
CPG_ISLAND_GC_THRESHOLD = 55

# Gemini API
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_FIRST_CANDIDATE_INDEX = 0
GEMINI_FIRST_PART_INDEX = 0
CONTENT_TYPE_JSON = "application/json"
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_TOO_MANY_REQUESTS = 429

# Response coercion defaults
DEFAULT_RELATIONSHIP = "activation"
REPRESSION_RELATIONSHIP = "repression"
DEFAULT_STRENGTH = 0.5
DEFAULT_CONFIDENCE = 0
DEFAULT_PREDICTION_NAME = "Unknown function"
DEFAULT_PREDICTION_CATEGORY = "Gene Regulation"
DEFAULT_HYPOTHESIS_TYPE = "Experimental Validation"
UNKNOWN_LABEL = "Unknown"
UNKNOWN_ERROR = "Unknown error"
SEQUENCE_NODE_ID = "DNA_SEQUENCE"
SEQUENCE_NODE_LABEL = "SEQUENCE"

PREDICTION_ID_PREFIX = "pred"
GENE_ID_PREFIX = "gene"
HYPOTHESIS_ID_PREFIX = "hyp"

# Fallback generation
FALLBACK_MAX_PREDICTIONS = 5
FALLBACK_GENE_COUNT = 5
FALLBACK_ACTIVATION_THRESHOLD = 0.4
FALLBACK_MIN_STRENGTH = 0.3
FALLBACK_STRENGTH_SPAN = 0.7
TATA_BOX_MOTIF = "TATA"
SILENCER_MOTIF_PATTERN = r"GCGC.*GCGC"

# Network layout
NETWORK_CENTER_X = 200.0
NETWORK_CENTER_Y = 150.0
NETWORK_RADIUS = 100.0
NETWORK_CANVAS_WIDTH = 400
NETWORK_CANVAS_HEIGHT = 300
NETWORK_CENTER_NODE_RADIUS = 28
NETWORK_GENE_NODE_RADIUS = 20
ACTIVATION_COLOR = "#22c55e"
REPRESSION_COLOR = "#ef4444"
SEQUENCE_NODE_COLOR = "#1e40af"

# Chat
CHAT_GREETING = (
    "Hello! I'm your AlphaGenome assistant. Speak or type your observations about the analyzed sequence."
)
SIMULATED_VOICE_TRANSCRIPT = (
    "The sequence appears to be active in liver tissue based on my preliminary data."
)
PROMPT_RECENT_HISTORY_LIMIT = 6
PROMPT_MAX_CONTEXT_PREDICTIONS = 3
PROMPT_MAX_CONTEXT_GENES = 5

# Export
PDF_FILENAME_TEMPLATE = "dna-analysis-report-{date}.pdf"
JSON_FILENAME_TEMPLATE = "alphagenomic-research-{date}.json"
JSON_EXPORT_INDENT = 2
PDF_GENE_DESCRIPTION_MAX_LENGTH = 40
CONFIDENCE_HIGH_THRESHOLD = 80
CONFIDENCE_MEDIUM_THRESHOLD = 60
CONFIDENCE_LOW_THRESHOLD = 40

# Credentials
CREDENTIAL_STORAGE_KEY = "gemini_api_key"

# UI
UI_TEXTAREA_HEIGHT = 180
UI_ACCEPTED_FILE_TYPES = ["txt", "fasta", "fa", "seq"]
NOTEBOOK_TIMESTAMP_FORMAT = "%b %d, %H:%M"
