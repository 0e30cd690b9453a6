"""
Localized UI strings with pass-through lookup.
"""

from enum import Enum
from typing import Any


class Language(str, Enum):
    """Supported UI languages."""

    EN = "en"
    ES = "es"
    FR = "fr"


LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.ES: "Español",
    Language.FR: "Français",
}

EN: dict[str, Any] = {
    "common": {
        "error": "Error",
    },
    "history": {
        "no_scans_yet": "No Scans Yet",
        "no_generations_yet": "No Generations Yet",
        "no_results": "No Results",
        "clear_confirm": "This will permanently delete all items.",
        "cleared": "History cleared",
        "no_scans_to_export": "There is no scan history to export.",
        "no_generations_to_export": "There is no generation history to export.",
    },
    "generator": {
        "empty_input": "Please enter a value to generate",
        "invalid_input": "Invalid Input",
        "cannot_render": "Unable to render this code",
    },
}

ES: dict[str, Any] = {
    "common": {
        "error": "Error",
    },
    "history": {
        "no_scans_yet": "Sin Escaneos",
        "no_generations_yet": "Sin Generaciones",
        "no_results": "Sin Resultados",
        "clear_confirm": "Esto eliminará permanentemente todos los elementos.",
        "cleared": "Historial borrado",
        "no_scans_to_export": "No hay historial de escaneos para exportar.",
        "no_generations_to_export": "No hay historial de generaciones para exportar.",
    },
    "generator": {
        "empty_input": "Introduce un valor para generar",
        "invalid_input": "Entrada no válida",
        "cannot_render": "No se puede mostrar este código",
    },
}

FR: dict[str, Any] = {
    "common": {
        "error": "Erreur",
    },
    "history": {
        "no_scans_yet": "Aucun Scan",
        "no_generations_yet": "Aucune Génération",
        "no_results": "Aucun Résultat",
        "clear_confirm": "Tous les éléments seront définitivement supprimés.",
        "cleared": "Historique effacé",
        "no_scans_to_export": "Aucun historique de scan à exporter.",
        "no_generations_to_export": "Aucun historique de génération à exporter.",
    },
    "generator": {
        "empty_input": "Veuillez saisir une valeur à générer",
        "invalid_input": "Saisie invalide",
        "cannot_render": "Impossible d'afficher ce code",
    },
}

TRANSLATIONS: dict[Language, dict[str, Any]] = {
    Language.EN: EN,
    Language.ES: ES,
    Language.FR: FR,
}


def get_translations(language: Language | str) -> dict[str, Any]:
    """Catalog for a language; unknown languages get English."""
    try:
        return TRANSLATIONS[Language(language)]
    except ValueError:
        return EN


def _lookup(catalog: dict[str, Any], key: str) -> str | None:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, language: Language | str = Language.EN) -> str:
    """
    Resolve a dotted key such as ``"history.no_results"``.

    Falls back to English, then to the key itself.
    """
    found = _lookup(get_translations(language), key)
    if found is None:
        found = _lookup(EN, key)
    return found if found is not None else key
