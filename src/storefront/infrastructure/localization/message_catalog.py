"""Dictionary-backed Localizer for the CLI (English and French)."""

from __future__ import annotations

from storefront.application.localizer import Localizer

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "MissingName": "Please enter a name",
        "MissingPrice": "Please enter a price",
        "PriceNotANumber": "The value entered for the price must be a number",
        "PriceNotGreaterThanZero": "The price must be greater than zero",
        "MissingQuantity": "Please enter a stock value",
        "StockNotAnInteger": "The value entered for the stock must be an integer",
        "StockNotGreaterThanZero": "The stock must be greater than zero",
        "CartEmpty": "Sorry, your cart is empty",
        "ErrorMissingName": "Please enter your name",
        "ErrorMissingAddress": "Please enter your address",
        "ErrorMissingCity": "Please enter your city",
        "ErrorMissingZipCode": "Please enter your zip code",
        "ErrorMissingCountry": "Please enter your country",
    },
    "fr": {
        "MissingName": "Veuillez saisir un nom",
        "MissingPrice": "Veuillez saisir un prix",
        "PriceNotANumber": "La valeur saisie pour le prix doit être un nombre",
        "PriceNotGreaterThanZero": "Le prix doit être supérieur à zéro",
        "MissingQuantity": "Veuillez saisir un stock",
        "StockNotAnInteger": "La valeur saisie pour le stock doit être un entier",
        "StockNotGreaterThanZero": "Le stock doit être supérieur à zéro",
        "CartEmpty": "Désolé, votre panier est vide",
        "ErrorMissingName": "Veuillez saisir votre nom",
        "ErrorMissingAddress": "Veuillez saisir votre adresse",
        "ErrorMissingCity": "Veuillez saisir votre ville",
        "ErrorMissingZipCode": "Veuillez saisir votre code postal",
        "ErrorMissingCountry": "Veuillez saisir votre pays",
    },
}


class MessageCatalogLocalizer(Localizer):

    def __init__(self, language: str = "en") -> None:
        if language not in MESSAGES:
            raise ValueError(f"Unsupported language {language!r}")
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def get(self, key: str) -> str:
        return MESSAGES[self._language].get(key, key)
