"""Campaign reference data: causes, civilities, payment methods and their labels"""

from typing import Dict, List

DONATION_AMOUNTS: List[int] = [20, 50, 100, 200]

DONATION_TYPE_LABELS: Dict[str, str] = {
    "ponctuel": "Don ponctuel",
    "regulier": "Don régulier",
}

CAUSE_LABELS: Dict[str, str] = {
    "aide-hivernale": "Aide Hivernale",
    "femmes-en-fete": "Femmes en Fête",
    "kit-scolaire": "Kit Scolaire",
    "precarite-menstruelle": "Lutte contre la Précarité Menstruelle",
    "noel-pour-tous": "Noël Pour Tous",
    "lutte-precarite": "Lutte contre la précarité",
}

TITLE_LABELS: Dict[str, str] = {
    "mr-mme": "Monsieur et Madame",
    "mme": "Madame",
    "mlle": "Mademoiselle",
    "mr": "Monsieur",
}

PAYMENT_METHOD_LABELS: Dict[str, str] = {
    "card": "Carte bancaire",
    "sepa": "Prélèvement SEPA",
    "cheque": "Chèque",
}

HOW_DID_YOU_KNOW: List[str] = [
    "Réseaux sociaux",
    "Bouche à oreille",
    "Moteur de recherche",
    "Presse",
    "Autre",
]

DEFAULT_CAUSE = "lutte-precarite"
DEFAULT_COUNTRY = "France"
