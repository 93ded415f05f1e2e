"""Static shop catalog."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShopItem:
    """An item shown in the shop; none can be bought yet."""
    key: str
    title: str
    description: str
    price: int
    available: bool = False


SHOP_ITEMS: Tuple[ShopItem, ...] = (
    ShopItem("themes", "🎨 UI Themes", "Customize your dashboard colors and effects", 100),
    ShopItem("animations", "✨ Animations", "Unlock special character animations", 150),
    ShopItem("sound_packs", "🎵 Sound Packs", "New sound effects and music", 75),
    ShopItem("badges", "🏆 Badges", "Collect special achievement badges", 50),
)
