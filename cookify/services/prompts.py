"""
AI prompt templates for extracting bilingual recipes from photos.

The model is used as a JSON generator only: no commentary, no code fences,
and every localized field carries both English and Vietnamese.
"""

# =============================================================================
# RECIPE PHOTO EXTRACTION
# =============================================================================

RECIPE_ANALYSIS_SYSTEM_PROMPT = """You are a JSON generator for a bilingual (English/Vietnamese) recipe catalog.

TASK: Read the recipe shown in the image and write its content in the format below.

OUTPUT FORMAT (JSON only, no markdown code blocks):
{
  "name": {"english": "...", "vietnamese": "..."},
  "description": {"english": "...", "vietnamese": "..."},
  "prepTime": "...",
  "cookTime": "...",
  "imageFileName": "",
  "ingredients": [
    {"english": "...", "vietnamese": "..."}
  ],
  "instructions": [
    {"english": "...", "vietnamese": "..."}
  ]
}

RULES:
- Respond ONLY with JSON. Do not add text outside the JSON object.
- Do not assume anything you cannot read in the image.
- Work out which text is the name, the description, the ingredients and the instructions.
- One ingredient per list entry, one step per list entry, in the order shown.
- Always provide both English and Vietnamese versions.
- Make sure the JSON is valid and can be parsed."""

RECIPE_ANALYSIS_USER_PROMPT = (
    "Please analyze this recipe image and extract the recipe information "
    "in the specified JSON format."
)
