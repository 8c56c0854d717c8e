"""
The 20 priority UK foraging genera.

Ordered by importance: safety-critical genera first, then beginner-friendly
commons, then good edibles, then intermediate genera.
"""

from typing import Dict, Tuple

ALL_GENERA: Tuple[str, ...] = (
    # Safety critical
    "Amanita",
    "Agaricus",
    # Beginner-friendly commons
    "Russula",
    "Boletus",
    "Cantharellus",
    "Lactarius",
    "Pleurotus",
    "Macrolepiota",
    "Coprinopsis",
    "Hydnum",
    # Good edibles
    "Laetiporus",
    "Fistulina",
    "Marasmius",
    "Craterellus",
    "Sparassis",
    "Calvatia",
    "Leccinum",
    # Intermediate (some edible, some toxic)
    "Armillaria",
    "Clitocybe",
    "Lepista",
)

COMMON_NAMES: Dict[str, str] = {
    "Amanita": "Death Cap family",
    "Agaricus": "Field Mushroom family",
    "Russula": "Brittlegills",
    "Boletus": "Boletes",
    "Cantharellus": "Chanterelle",
    "Lactarius": "Milkcaps",
    "Pleurotus": "Oyster Mushrooms",
    "Macrolepiota": "Parasol Mushroom",
    "Coprinopsis": "Ink Caps",
    "Hydnum": "Hedgehog Fungus",
    "Laetiporus": "Chicken of the Woods",
    "Fistulina": "Beefsteak Fungus",
    "Marasmius": "Fairy Ring Champignon",
    "Craterellus": "Horn of Plenty",
    "Sparassis": "Cauliflower Fungus",
    "Calvatia": "Giant Puffball",
    "Leccinum": "Rough-stemmed Boletes",
    "Armillaria": "Honey Fungus",
    "Clitocybe": "Funnels",
    "Lepista": "Blewits",
}

# Lowercase lookup used when genus names appear in free text
GENUS_LOOKUP: Dict[str, str] = {genus.lower(): genus for genus in ALL_GENERA}


def common_name(genus: str) -> str:
    return COMMON_NAMES.get(genus, genus)
