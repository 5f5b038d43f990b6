"""
Check verdict. Serializes to the wire shape {status, productName?, cause}.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

UNKNOWN_PRODUCT_NAME = "Produit Inconnu"

CAUSE_COMPATIBLE = "Ce produit semble compatible avec vos filtres."
CAUSE_MISSING_PARAMS = "Code-barres ou filtres manquants"
CAUSE_NOT_FOUND = "Produit non trouvé dans Open Food Facts."
CAUSE_NO_INGREDIENTS = "Aucune liste d'ingrédients disponible pour ce produit."
CAUSE_SERVER_ERROR = "Le Cerveau a rencontré un problème."


class VerdictStatus(str, Enum):
    COMPATIBLE = "OK"
    INCOMPATIBLE = "Non"
    UNKNOWN = "Inconnu"
    ERROR = "Erreur"
    SERVER_ERROR = "Erreur Serveur"


HTTP_STATUS_BY_VERDICT = {
    VerdictStatus.ERROR: 400,
    VerdictStatus.SERVER_ERROR: 500,
}


@dataclass
class Verdict:
    status: VerdictStatus
    cause: str
    product_name: Optional[str] = None
    filter_id: Optional[str] = None
    filter_name: Optional[str] = None
    matched_keyword: Optional[str] = None

    @property
    def status_label(self) -> str:
        """'Non <filter name>' for an incompatibility, the plain status otherwise."""
        if self.status == VerdictStatus.INCOMPATIBLE:
            return f"{self.status.value} {self.filter_name or self.filter_id}"
        return self.status.value

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_VERDICT.get(self.status, 200)

    def with_product_name(self, product_name: Optional[str]) -> "Verdict":
        return Verdict(
            status=self.status,
            cause=self.cause,
            product_name=product_name,
            filter_id=self.filter_id,
            filter_name=self.filter_name,
            matched_keyword=self.matched_keyword,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"status": self.status_label}
        if self.product_name is not None:
            out["productName"] = self.product_name
        out["cause"] = self.cause
        return out

    @classmethod
    def compatible(cls) -> "Verdict":
        return cls(VerdictStatus.COMPATIBLE, CAUSE_COMPATIBLE)

    @classmethod
    def incompatible(cls, filter_id: str, filter_name: str, keyword: str) -> "Verdict":
        return cls(
            VerdictStatus.INCOMPATIBLE,
            f"Contient : {keyword}",
            filter_id=filter_id,
            filter_name=filter_name,
            matched_keyword=keyword,
        )

    @classmethod
    def unknown(cls, cause: str, product_name: Optional[str] = None) -> "Verdict":
        return cls(VerdictStatus.UNKNOWN, cause, product_name=product_name)

    @classmethod
    def error(cls, cause: str = CAUSE_MISSING_PARAMS) -> "Verdict":
        return cls(VerdictStatus.ERROR, cause)

    @classmethod
    def server_error(cls) -> "Verdict":
        return cls(VerdictStatus.SERVER_ERROR, CAUSE_SERVER_ERROR)
