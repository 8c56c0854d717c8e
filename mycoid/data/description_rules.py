"""
Free-text rules over description_notes.

All rows are case-insensitive substring ('includes') matches. A description
rule that fails to match is never counted against a genus: free text holds
many unrelated fragments, so only explicit mentions carry weight.
"""

from typing import List, Tuple

from mycoid.services.identification.models import EvidenceTier, FeatureRule, includes

STRONG = EvidenceTier.STRONG
MODERATE = EvidenceTier.MODERATE
WEAK = EvidenceTier.WEAK

FIELD = "description_notes"

# (rule_id, needle, genus, tier, supporting, description)
_ROWS: List[tuple] = [
    # Russula
    ("notes-russula-depressed", "depress", "Russula", MODERATE, True, "Depressed cap centre is common in mature Russula"),
    ("notes-russula-dipped", "dipped", "Russula", MODERATE, True, "Cap dipped in the middle suggests Russula"),
    ("notes-russula-distant", "distant", "Russula", WEAK, True, "Distant gills are seen in several Russula"),
    ("notes-russula-widely-spaced", "widely spaced", "Russula", WEAK, True, "Widely spaced gills are seen in several Russula"),
    ("notes-russula-brittle-gills", "brittle gill", "Russula", STRONG, True, "Brittle gills that flake are characteristic of Russula"),
    ("notes-russula-taste-test", "taste test", "Russula", WEAK, True, "The taste test is a Russula procedure"),
    ("notes-russula-rings-of-colour", "rings of colo", "Russula", WEAK, True, "Zoned colour on the cap occurs in some Russula"),
    ("notes-russula-peppery", "pepper", "Russula", MODERATE, True, "Peppery taste marks the hot Russula species"),
    ("notes-russula-acrid", "acrid", "Russula", MODERATE, True, "Acrid taste marks the hot Russula species"),
    ("notes-russula-mild-taste", "mild taste", "Russula", WEAK, True, "Mild taste marks the edible Russula species"),
    # Lactarius
    ("notes-lactarius-milk", "milk", "Lactarius", STRONG, True, "Milk exuding from cut gills is the Lactarius signature"),
    ("notes-lactarius-latex", "latex", "Lactarius", STRONG, True, "Latex from the gills is the Lactarius signature"),
    ("notes-lactarius-concentric", "concentric", "Lactarius", MODERATE, True, "Concentric zones on the cap are typical of Lactarius"),
    ("notes-lactarius-rings-of-colour", "rings of colo", "Lactarius", MODERATE, True, "Rings of colour on the cap are typical of Lactarius"),
    ("notes-lactarius-bands", "bands", "Lactarius", MODERATE, True, "Colour bands on the cap are typical of Lactarius"),
    ("notes-lactarius-depressed", "depress", "Lactarius", WEAK, True, "Depressed cap centre is common in Lactarius"),
    # Macrolepiota
    ("notes-macrolepiota-snakeskin", "snakeskin", "Macrolepiota", STRONG, True, "Snakeskin pattern on the stem is typical of the Parasol"),
    ("notes-macrolepiota-ball-socket", "ball and socket", "Macrolepiota", STRONG, True, "Ball and socket cap joint is typical of the Parasol"),
    ("notes-macrolepiota-loose-skirt", "loose skirt", "Macrolepiota", MODERATE, True, "A loose, movable ring suggests the Parasol"),
    ("notes-macrolepiota-fibrous", "fibrous", "Macrolepiota", WEAK, True, "Fibrous stem is consistent with the Parasol"),
    # Marasmius
    ("notes-marasmius-tough-stem", "tough stem", "Marasmius", MODERATE, True, "Tough, bendy stem is typical of Marasmius"),
    ("notes-marasmius-knot", "knot", "Marasmius", MODERATE, True, "A stem that can be tied in a knot suggests Marasmius"),
    ("notes-marasmius-umbo", "umbo", "Marasmius", MODERATE, True, "A central umbo is typical of the Fairy Ring Champignon"),
    ("notes-marasmius-fairy-ring", "fairy ring", "Marasmius", MODERATE, True, "Growing in a fairy ring suggests Marasmius"),
    ("notes-marasmius-distant", "distant", "Marasmius", MODERATE, True, "Distant gills are typical of Marasmius"),
    ("notes-marasmius-widely-spaced", "widely spaced", "Marasmius", MODERATE, True, "Widely spaced gills are typical of Marasmius"),
    # Cantharellus
    ("notes-cantharellus-false-gills", "false gills", "Cantharellus", STRONG, True, "False gills (blunt folds) are the chanterelle signature"),
    ("notes-cantharellus-forked", "forked", "Cantharellus", MODERATE, True, "Forked ridges suggest a chanterelle"),
    ("notes-cantharellus-apricot", "apricot", "Cantharellus", MODERATE, True, "Apricot smell suggests a chanterelle"),
    # Coprinopsis
    ("notes-coprinopsis-deliquesce", "deliquesc", "Coprinopsis", STRONG, True, "Gills deliquescing into liquid is the ink cap signature"),
    ("notes-coprinopsis-inky", "inky", "Coprinopsis", MODERATE, True, "Inky black gills suggest an ink cap"),
    ("notes-coprinopsis-dissolving", "dissolv", "Coprinopsis", MODERATE, True, "Gills dissolving suggest an ink cap"),
    # Agaricus
    ("notes-agaricus-yellow-stain", "yellow stain", "Agaricus", STRONG, False, "Yellow staining at the stem base marks the toxic Yellow Stainer"),
    ("notes-agaricus-phenol", "phenol", "Agaricus", STRONG, False, "Phenol or ink smell marks the toxic Yellow Stainer"),
    ("notes-agaricus-anise", "anise", "Agaricus", MODERATE, True, "Anise smell suggests an edible Agaricus"),
    # Amanita
    ("notes-amanita-volva", "volva", "Amanita", STRONG, True, "A volva at the base is a strong Amanita signal"),
    ("notes-amanita-cup-at-base", "cup at base", "Amanita", STRONG, True, "A cup at the stem base suggests an Amanita volva"),
    ("notes-amanita-warts", "warts", "Amanita", MODERATE, True, "Warts on the cap are veil remnants typical of Amanita"),
    # Single signatures
    ("notes-boletus-reticulated", "reticulat", "Boletus", MODERATE, True, "A reticulated (net) pattern on the stem suggests Boletus"),
    ("notes-leccinum-scabers", "scaber", "Leccinum", STRONG, True, "Rough scabers on the stem are the Leccinum signature"),
    ("notes-hydnum-spines", "spines", "Hydnum", STRONG, True, "Spines under the cap suggest the Hedgehog Fungus"),
    ("notes-laetiporus-bracket", "bracket", "Laetiporus", MODERATE, True, "Bracket growth on a tree suggests Chicken of the Woods"),
    ("notes-fistulina-marbled", "marbled", "Fistulina", STRONG, True, "Marbled flesh like raw steak is the Beefsteak signature"),
    ("notes-lepista-violet", "violet", "Lepista", MODERATE, True, "Violet colouring suggests a Blewit"),
    ("notes-armillaria-bootlace", "bootlace", "Armillaria", STRONG, True, "Bootlace rhizomorphs under bark are the Honey Fungus signature"),
    ("notes-craterellus-dark-funnel", "dark funnel", "Craterellus", STRONG, True, "A dark funnel shape suggests Horn of Plenty"),
    ("notes-sparassis-cauliflower", "cauliflower", "Sparassis", STRONG, True, "A cauliflower-like body is the Sparassis signature"),
    ("notes-calvatia-puffball", "puffball", "Calvatia", STRONG, True, "A puffball form suggests Calvatia"),
    ("notes-pleurotus-lateral-stem", "lateral stem", "Pleurotus", MODERATE, True, "A short lateral stem on wood suggests an Oyster"),
    ("notes-clitocybe-inrolled", "inrolled", "Clitocybe", MODERATE, True, "An inrolled cap margin is typical of Clitocybe"),
]

DESCRIPTION_RULES: Tuple[FeatureRule, ...] = tuple(
    FeatureRule(rule_id, FIELD, includes(needle), genus, tier, supporting, description)
    for rule_id, needle, genus, tier, supporting, description in _ROWS
)
