"""
MargDarshak Default Parameters
Provider endpoints, model lists, prompt defaults and detection vocabularies.
"""

APP_TITLE = "Road Safety Intervention GPT"
APP_REFERER = "http://localhost:8501"

# Provider A: OpenRouter (single fixed model)
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_MODEL = "minimax/minimax-01"
OPENROUTER_TEMPERATURE = 0.7
OPENROUTER_MAX_TOKENS = 4000

# Provider B: Groq (models tried in this order)
GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODELS = [
    "openai/gpt-oss-120b",
    "llama3-70b-8192",
    "llama3.1-405b-instruct",
    "llama3.1-70b-versatile",
    "llama3.1-8b-instant",
    "llama3-8b-8192",
]
GROQ_TEMPERATURE = 0.7
GROQ_MAX_TOKENS = 800

# Error signals that mean "try the next Groq model"
MODEL_UNAVAILABLE_CODES = {"model_decommissioned"}
MODEL_UNAVAILABLE_MARKERS = ["model_decommissioned", "model not found"]

# No timeout by default: rely on the transport
REQUEST_TIMEOUT = None

# Key resolution: env var pairs, then the local settings file
PROVIDER_ENV_VARS = {
    "openrouter": ["VITE_OPENROUTER_API_KEY", "OPENROUTER_API_KEY"],
    "groq": ["VITE_GROQ_API_KEY", "GROQ_API_KEY"],
}
LOCAL_SETTINGS_KEYS = {
    "openrouter": "openrouter_api_key",
    "groq": "groq_api_key",
}
SETTINGS_PATH_ENV = "MARGDARSHAK_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = "~/.margdarshak/settings.json"

# Prompt assembly defaults
DEFAULT_ROAD_TYPE = "NH"
DEFAULT_CONDITION = "normal_conditions"
DEFAULT_PROBLEM_CATEGORY = "Damaged"
DEFAULT_INFRASTRUCTURE_TYPE = "Road Sign"
MAX_INFRASTRUCTURE_MATCHES = 3

# Wildcard value used in the safety table
WILDCARD = "all"

# States recognised in user prompts (first match wins)
STATE_NAMES = [
    "Gujarat", "Maharashtra", "Karnataka", "Andhra Pradesh", "Uttar Pradesh", "Punjab",
    "Tamil Nadu", "Telangana", "Delhi", "Rajasthan", "Madhya Pradesh",
    "Haryana", "Bihar", "West Bengal", "Assam", "Kerala", "Chhattisgarh",
    "Jharkhand", "Uttarakhand", "Himachal", "Goa", "Tripura",
]

# Phrases that mark an answer as commentary about missing data
META_COMMENTARY_PHRASES = [
    "do not have the exact counts",
    "do not have the data",
    "please provide",
    "you need to provide",
    "if you have the raw",
    "import the data",
    "below i outline",
    "two ways to move forward",
    "step by step",
    "how to generate",
    "i do not have",
]

# Answers containing any of these are kept as-is
SUBSTANTIVE_MARKERS = ["|", "#", "Location"]

# Meta-commentary is tolerated when the answer still names these
SPECIFIC_DATA_MARKERS = ["NH", "hotspot"]
