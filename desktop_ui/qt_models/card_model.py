import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Hashable, List, Optional

from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QPersistentModelIndex, Qt, QUrl

logger = logging.getLogger(__name__)


@dataclass
class CardView:
    """What the board currently shows for one card."""
    identity: Optional[Hashable] = None
    face_up: bool = False
    enabled: bool = True


class CardModel(QAbstractListModel):
    IdentityRole = Qt.ItemDataRole.UserRole + 1
    ImagePathRole = Qt.ItemDataRole.UserRole + 2
    FaceUpRole = Qt.ItemDataRole.UserRole + 3
    EnabledRole = Qt.ItemDataRole.UserRole + 4
    BackImagePathRole = Qt.ItemDataRole.UserRole + 5

    def __init__(self, card_count: int = 0, image_dir: Optional[Path] = None,
                 back_image: str = "card_back.png") -> None:
        super().__init__()
        self.cards: List[CardView] = [CardView() for _ in range(card_count)]
        self.image_dir = image_dir
        self.back_image = back_image
        self._missing_images: set[str] = set()
        logger.debug("CardModel created with %d cards", len(self.cards))

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self.cards)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.cards):
            return None

        card = self.cards[index.row()]

        if role == self.IdentityRole or role == Qt.ItemDataRole.DisplayRole:
            return self.display_name(card.identity) if card.face_up else ""
        elif role == self.ImagePathRole:
            if card.face_up and card.identity is not None:
                return self.image_url(str(card.identity))
            return ""
        elif role == self.BackImagePathRole:
            return self.image_url(self.back_image)
        elif role == self.FaceUpRole:
            return card.face_up
        elif role == self.EnabledRole:
            return card.enabled

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            self.IdentityRole: QByteArray(b"identity"),
            self.ImagePathRole: QByteArray(b"imagePath"),
            self.FaceUpRole: QByteArray(b"faceUp"),
            self.EnabledRole: QByteArray(b"cardEnabled"),
            self.BackImagePathRole: QByteArray(b"backImagePath")
        }

    # ------------------------------------------------------------------
    def show_front(self, row: int, identity: Hashable) -> None:
        card = self.cards[row]
        card.identity = identity
        card.face_up = True
        self._row_changed(row)

    def show_back(self, row: int) -> None:
        self.cards[row].face_up = False
        self._row_changed(row)

    def set_enabled(self, row: int, enabled: bool) -> None:
        self.cards[row].enabled = enabled
        self._row_changed(row)

    def _row_changed(self, row: int) -> None:
        model_index = self.index(row, 0)
        self.dataChanged.emit(model_index, model_index)

    # ------------------------------------------------------------------
    @staticmethod
    def display_name(identity: Optional[Hashable]) -> str:
        """Readable label for an identity, e.g. "clownfish.png" -> "Clownfish"."""
        if identity is None:
            return ""
        return Path(str(identity)).stem.replace("_", " ").capitalize()

    def image_url(self, file_name: str) -> str:
        """File URL for an image, or "" when the image is not available."""
        if self.image_dir is None:
            return ""
        path = self.image_dir / file_name
        if path.exists():
            return QUrl.fromLocalFile(str(path)).toString()
        if file_name not in self._missing_images:
            self._missing_images.add(file_name)
            logger.warning("Could not find image: %s", path)
        return ""
