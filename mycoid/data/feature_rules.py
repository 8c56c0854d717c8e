"""
Structured feature rules for the seed genera.

Each row maps one observation field to evidence for or against a genus.
Rows are kept in authoring order; the scorer's diminishing-returns step
depends on that order, so append rather than reorder.

Row layout: (rule_id, field, match, tier, supporting, description)
"""

from typing import List, Tuple

from mycoid.services.identification.models import (
    EvidenceTier,
    FeatureRule,
    equals,
    in_range,
    includes,
    one_of,
)

DEFINITIVE = EvidenceTier.DEFINITIVE
STRONG = EvidenceTier.STRONG
MODERATE = EvidenceTier.MODERATE
EXCLUSIONARY = EvidenceTier.EXCLUSIONARY

_rules: List[FeatureRule] = []


def _add(genus: str, *rows: tuple) -> None:
    for rule_id, field, match, tier, supporting, description in rows:
        _rules.append(FeatureRule(rule_id, field, match, genus, tier, supporting, description))

_add("Russula",
    ("russula-brittle-flesh", "flesh_texture", equals("brittle"), DEFINITIVE, True, "Brittle, chalky flesh that snaps cleanly is definitive for Russula/Lactarius"),
    ("russula-no-ring", "ring_present", equals(False), STRONG, True, "Russula never has a ring"),
    ("russula-no-volva", "volva_present", equals(False), STRONG, True, "Russula never has a volva"),
    ("russula-gills", "gill_type", equals("gills"), STRONG, True, "Russula has gills (not pores or teeth)"),
    ("russula-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Russula grows in woodland, forest edges, and parkland"),
    ("russula-soil", "substrate", includes("soil"), MODERATE, True, "Russula grows from soil (never on wood)"),
    ("russula-season", "season_month", in_range(7, 11), MODERATE, True, "Russula fruits July-November in the UK"),
    ("russula-spore-print", "spore_print_color", one_of("white", "cream", "pale cream"), MODERATE, True, "Most Russula have white to cream spore prints"),
    ("russula-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Russula entirely"),
    ("russula-exclude-ring", "ring_present", equals(True), EXCLUSIONARY, False, "A ring rules out Russula"),
    ("russula-exclude-volva", "volva_present", equals(True), EXCLUSIONARY, False, "A volva rules out Russula"),
    ("russula-exclude-wood", "substrate", equals("wood"), EXCLUSIONARY, False, "Growing on wood rules out Russula (strictly mycorrhizal)"),
)

_add("Lactarius",
    ("lactarius-brittle-flesh", "flesh_texture", equals("brittle"), DEFINITIVE, True, "Brittle flesh is definitive for Russula/Lactarius family"),
    ("lactarius-gills", "gill_type", equals("gills"), STRONG, True, "Lactarius has gills"),
    ("lactarius-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Lactarius grows in woodland (mycorrhizal)"),
    ("lactarius-season", "season_month", in_range(7, 11), MODERATE, True, "Lactarius fruits July-November in the UK"),
    ("lactarius-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Lactarius"),
)

_add("Boletus",
    ("boletus-pores", "gill_type", equals("pores"), DEFINITIVE, True, "Sponge-like pore surface is definitive for boletes"),
    ("boletus-stem", "stem_present", equals(True), STRONG, True, "Boletes have a central stem"),
    ("boletus-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Most boletes are woodland mycorrhizal species"),
    ("boletus-season", "season_month", in_range(7, 11), MODERATE, True, "Boletes fruit mainly July-November"),
    ("boletus-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out boletes"),
)

_add("Amanita",
    ("amanita-volva", "volva_present", equals(True), STRONG, True, "A volva at the base is a strong Amanita signal"),
    ("amanita-ring", "ring_present", equals(True), STRONG, True, "Most Amanita have a ring on the stem"),
    ("amanita-gills", "gill_type", equals("gills"), STRONG, True, "Amanita has gills"),
    ("amanita-white-gills", "gill_color", one_of("white", "pure white"), STRONG, True, "Amanita typically has white gills"),
    ("amanita-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Amanita grows with trees (mycorrhizal)"),
    ("amanita-season", "season_month", in_range(7, 11), MODERATE, True, "Amanita fruits mainly late summer to autumn"),
    ("amanita-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Amanita"),
    ("amanita-exclude-brittle", "flesh_texture", equals("brittle"), EXCLUSIONARY, False, "Brittle flesh rules out Amanita (Amanita flesh is fibrous)"),
)

_add("Agaricus",
    ("agaricus-gills", "gill_type", equals("gills"), STRONG, True, "Agaricus has gills"),
    ("agaricus-ring", "ring_present", equals(True), STRONG, True, "Agaricus typically has a ring"),
    ("agaricus-pink-brown-gills", "gill_color", one_of("pink", "brown", "chocolate brown", "dark brown"), STRONG, True, "Agaricus gills are pink (young) to chocolate brown (mature)"),
    ("agaricus-brown-spore", "spore_print_color", one_of("brown", "dark brown", "chocolate brown"), STRONG, True, "Agaricus has a dark brown/chocolate spore print"),
    ("agaricus-grassland", "habitat", one_of("grassland", "meadow", "field", "lawn", "pasture"), MODERATE, True, "Many Agaricus species grow in grassland"),
    ("agaricus-anise-smell", "smell", one_of("anise", "aniseed", "mushroomy"), MODERATE, True, "Many Agaricus smell of anise or have a mushroomy smell"),
    ("agaricus-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Agaricus"),
    ("agaricus-exclude-white-gills", "gill_color", one_of("white", "pure white"), EXCLUSIONARY, False, "Pure white gills rule out Agaricus (would suggest Amanita)"),
)

_add("Cantharellus",
    ("cantharellus-ridges", "gill_type", equals("ridges"), DEFINITIVE, True, "Chanterelles have forked ridges, not true gills"),
    ("cantharellus-yellow-cap", "cap_color", includes("yellow"), STRONG, True, "Chanterelles are typically egg-yellow to golden"),
    ("cantharellus-apricot-smell", "smell", one_of("apricot", "fruity", "apricots"), STRONG, True, "Chanterelles have a distinctive apricot/fruity smell"),
    ("cantharellus-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Chanterelles grow in woodland (mycorrhizal)"),
    ("cantharellus-soil", "substrate", includes("soil"), MODERATE, True, "Chanterelles grow from soil, not wood"),
    ("cantharellus-season", "season_month", in_range(7, 11), MODERATE, True, "Chanterelles fruit July-November in the UK"),
    ("cantharellus-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Cantharellus (has ridges/false gills)"),
    ("cantharellus-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Cantharellus"),
)

_add("Pleurotus",
    ("pleurotus-wood", "substrate", equals("wood"), STRONG, True, "Oyster mushrooms grow on wood (saprotrophic)"),
    ("pleurotus-gills", "gill_type", equals("gills"), STRONG, True, "Oyster mushrooms have decurrent gills"),
    ("pleurotus-clustered", "growth_pattern", one_of("clustered", "overlapping", "tiered"), STRONG, True, "Oyster mushrooms grow in overlapping clusters on wood"),
    ("pleurotus-white-spore", "spore_print_color", one_of("white", "cream", "pale lilac"), MODERATE, True, "Oyster mushroom spore print is white to pale lilac"),
    ("pleurotus-anise-smell", "smell", one_of("anise", "aniseed", "mushroomy", "pleasant"), MODERATE, True, "Oyster mushrooms have a pleasant anise/mushroomy smell"),
    ("pleurotus-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Pleurotus"),
    ("pleurotus-exclude-soil", "substrate", equals("soil"), EXCLUSIONARY, False, "Growing from soil rules out Pleurotus (must be on wood)"),
)

_add("Macrolepiota",
    ("macrolepiota-gills", "gill_type", equals("gills"), STRONG, True, "Parasol mushrooms have free white gills"),
    ("macrolepiota-ring", "ring_present", equals(True), STRONG, True, "Parasol mushrooms have a large, movable double ring"),
    ("macrolepiota-no-volva", "volva_present", equals(False), STRONG, True, "Parasol mushrooms do NOT have a volva (unlike Amanita)"),
    ("macrolepiota-large", "cap_size_cm", in_range(min=10), STRONG, True, "Parasol cap is typically 10-30cm across"),
    ("macrolepiota-grassland", "habitat", one_of("grassland", "meadow", "field", "parkland"), MODERATE, True, "Parasol mushrooms favour grassland and woodland edges"),
    ("macrolepiota-season", "season_month", in_range(7, 11), MODERATE, True, "Parasol fruits July-November"),
    ("macrolepiota-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Macrolepiota"),
    ("macrolepiota-exclude-volva", "volva_present", equals(True), EXCLUSIONARY, False, "A volva rules out Macrolepiota (suggests Amanita)"),
)

_add("Coprinopsis",
    ("coprinopsis-gills", "gill_type", equals("gills"), STRONG, True, "Ink caps have crowded, thin gills"),
    ("coprinopsis-inky", "bruising_color", includes("ink"), STRONG, True, "Ink caps deliquesce (dissolve) into inky black liquid"),
    ("coprinopsis-grassland", "habitat", one_of("grassland", "garden", "lawn", "parkland", "woodland"), MODERATE, True, "Ink caps grow in a variety of habitats"),
    ("coprinopsis-clustered", "growth_pattern", one_of("clustered", "scattered"), MODERATE, True, "Ink caps often grow in groups"),
    ("coprinopsis-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Coprinopsis"),
)

_add("Hydnum",
    ("hydnum-teeth", "gill_type", equals("teeth"), DEFINITIVE, True, "Teeth/spines under the cap are definitive for Hydnum"),
    ("hydnum-cream-cap", "cap_color", one_of("cream", "pale orange", "buff", "peach"), STRONG, True, "Hedgehog fungus has a cream to pale orange cap"),
    ("hydnum-woodland", "habitat", one_of("woodland", "forest"), MODERATE, True, "Hedgehog fungus grows in woodland"),
    ("hydnum-soil", "substrate", includes("soil"), MODERATE, True, "Hedgehog fungus grows from soil"),
    ("hydnum-season", "season_month", in_range(8, 12), MODERATE, True, "Hedgehog fungus fruits August-December"),
    ("hydnum-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Hydnum (has teeth)"),
    ("hydnum-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Hydnum"),
)

_add("Laetiporus",
    ("laetiporus-pores", "gill_type", equals("pores"), STRONG, True, "Chicken of the Woods has a pore surface"),
    ("laetiporus-wood", "substrate", equals("wood"), STRONG, True, "Chicken of the Woods grows on living/dead trees"),
    ("laetiporus-orange", "cap_color", includes("orange"), STRONG, True, "Chicken of the Woods is bright orange/yellow"),
    ("laetiporus-no-stem", "stem_present", equals(False), MODERATE, True, "Chicken of the Woods is a bracket fungus (no true stem)"),
    ("laetiporus-tiered", "growth_pattern", one_of("tiered", "clustered", "overlapping"), MODERATE, True, "Grows in overlapping tiers on tree trunks"),
    ("laetiporus-season", "season_month", in_range(5, 10), MODERATE, True, "Fruits May-October"),
    ("laetiporus-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Laetiporus"),
    ("laetiporus-exclude-soil", "substrate", equals("soil"), EXCLUSIONARY, False, "Growing from soil rules out Laetiporus (must be on wood)"),
)

_add("Fistulina",
    ("fistulina-pores", "gill_type", equals("pores"), STRONG, True, "Beefsteak fungus has a pore surface (tubular)"),
    ("fistulina-wood", "substrate", equals("wood"), STRONG, True, "Beefsteak fungus grows on oak and sweet chestnut"),
    ("fistulina-red", "cap_color", one_of("red", "dark red", "blood red", "liver"), STRONG, True, "Beefsteak fungus is dark red, resembling raw meat"),
    ("fistulina-no-stem", "stem_present", equals(False), MODERATE, True, "Beefsteak fungus is a bracket (no stem or very short)"),
    ("fistulina-season", "season_month", in_range(8, 11), MODERATE, True, "Fruits August-November"),
    ("fistulina-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Fistulina"),
    ("fistulina-exclude-soil", "substrate", equals("soil"), EXCLUSIONARY, False, "Growing from soil rules out Fistulina (must be on wood)"),
)

_add("Marasmius",
    ("marasmius-gills", "gill_type", equals("gills"), STRONG, True, "Fairy ring champignon has widely-spaced gills"),
    ("marasmius-tough", "flesh_texture", equals("tough"), STRONG, True, "Marasmius has tough, wiry flesh that revives when wet"),
    ("marasmius-ring-growth", "growth_pattern", one_of("ring", "fairy ring", "arc"), STRONG, True, "Fairy ring champignon often grows in rings or arcs"),
    ("marasmius-grassland", "habitat", one_of("grassland", "lawn", "meadow", "parkland"), MODERATE, True, "Fairy ring champignon typically grows in grassland"),
    ("marasmius-season", "season_month", in_range(6, 11), MODERATE, True, "Fruits June-November"),
    ("marasmius-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Marasmius"),
)

_add("Craterellus",
    ("craterellus-smooth", "gill_type", equals("smooth"), DEFINITIVE, True, "Horn of Plenty has a smooth to slightly wrinkled underside (no gills or pores)"),
    ("craterellus-dark-cap", "cap_color", one_of("black", "dark brown", "dark grey", "charcoal"), STRONG, True, "Horn of Plenty is very dark, black to dark brown"),
    ("craterellus-woodland", "habitat", one_of("woodland", "forest"), MODERATE, True, "Horn of Plenty grows in deciduous woodland"),
    ("craterellus-soil", "substrate", includes("soil"), MODERATE, True, "Horn of Plenty grows from soil among leaf litter"),
    ("craterellus-season", "season_month", in_range(9, 12), MODERATE, True, "Fruits September-December"),
    ("craterellus-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Craterellus"),
    ("craterellus-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Craterellus"),
)

_add("Sparassis",
    ("sparassis-smooth", "gill_type", equals("smooth"), STRONG, True, "Cauliflower fungus has no gills/pores, lobed, brain-like structure"),
    ("sparassis-wood", "substrate", equals("wood"), STRONG, True, "Cauliflower fungus grows at the base of conifer trunks"),
    ("sparassis-cream", "cap_color", one_of("cream", "white", "pale yellow"), STRONG, True, "Cauliflower fungus is cream to pale yellow"),
    ("sparassis-season", "season_month", in_range(8, 11), MODERATE, True, "Fruits August-November"),
    ("sparassis-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Sparassis"),
    ("sparassis-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Sparassis"),
)

_add("Calvatia",
    ("calvatia-smooth", "gill_type", equals("smooth"), STRONG, True, "Puffballs have no gills or pores, interior is solid when young"),
    ("calvatia-white", "cap_color", one_of("white", "cream", "pale"), STRONG, True, "Most puffballs are white when young"),
    ("calvatia-grassland", "habitat", one_of("grassland", "meadow", "lawn", "parkland"), MODERATE, True, "Giant puffball favours grassland and meadow"),
    ("calvatia-solitary", "growth_pattern", one_of("solitary", "scattered"), MODERATE, True, "Puffballs typically grow solitary or scattered"),
    ("calvatia-season", "season_month", in_range(7, 11), MODERATE, True, "Puffballs fruit July-November"),
    ("calvatia-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "Gills rule out puffballs"),
    ("calvatia-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out puffballs"),
)

_add("Leccinum",
    ("leccinum-pores", "gill_type", equals("pores"), DEFINITIVE, True, "Leccinum has a sponge-like pore surface (bolete)"),
    ("leccinum-stem", "stem_present", equals(True), STRONG, True, "Leccinum has a tall stem with rough scales/scabers"),
    ("leccinum-woodland", "habitat", one_of("woodland", "forest", "parkland"), MODERATE, True, "Leccinum grows in woodland (mycorrhizal with birch, oak, etc.)"),
    ("leccinum-season", "season_month", in_range(7, 11), MODERATE, True, "Leccinum fruits July-November"),
    ("leccinum-exclude-gills", "gill_type", equals("gills"), EXCLUSIONARY, False, "True gills rule out Leccinum"),
)

_add("Armillaria",
    ("armillaria-gills", "gill_type", equals("gills"), STRONG, True, "Honey fungus has gills"),
    ("armillaria-wood", "substrate", equals("wood"), STRONG, True, "Honey fungus grows on wood (parasitic/saprotrophic)"),
    ("armillaria-ring", "ring_present", equals(True), STRONG, True, "Honey fungus typically has a ring"),
    ("armillaria-clustered", "growth_pattern", one_of("clustered", "tufted"), STRONG, True, "Honey fungus grows in large clusters at base of trees/stumps"),
    ("armillaria-season", "season_month", in_range(9, 12), MODERATE, True, "Honey fungus fruits September-December"),
    ("armillaria-honey-cap", "cap_color", one_of("honey", "yellow-brown", "tawny", "brown"), MODERATE, True, "Honey fungus cap is typically honey-brown"),
    ("armillaria-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Armillaria"),
    ("armillaria-exclude-soil", "substrate", equals("soil"), EXCLUSIONARY, False, "Growing from soil rules out Armillaria (must be on wood)"),
)

_add("Clitocybe",
    ("clitocybe-gills", "gill_type", equals("gills"), STRONG, True, "Clitocybe has decurrent gills"),
    ("clitocybe-funnel", "cap_shape", one_of("funnel", "depressed", "concave"), STRONG, True, "Many Clitocybe species have funnel-shaped or depressed caps"),
    ("clitocybe-no-ring", "ring_present", equals(False), STRONG, True, "Clitocybe does not have a ring"),
    ("clitocybe-leaf-litter", "substrate", one_of("leaf litter", "soil"), MODERATE, True, "Clitocybe often grows in leaf litter or on soil"),
    ("clitocybe-woodland", "habitat", one_of("woodland", "forest", "garden"), MODERATE, True, "Clitocybe often found in woodland and gardens"),
    ("clitocybe-season", "season_month", in_range(9, 12), MODERATE, True, "Clitocybe fruits mainly autumn to early winter"),
    ("clitocybe-white-spore", "spore_print_color", one_of("white", "cream", "pale cream"), MODERATE, True, "Clitocybe has a white to cream spore print"),
    ("clitocybe-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Clitocybe"),
    ("clitocybe-exclude-ring", "ring_present", equals(True), EXCLUSIONARY, False, "A ring rules out Clitocybe"),
)

_add("Lepista",
    ("lepista-gills", "gill_type", equals("gills"), STRONG, True, "Lepista has gills"),
    ("lepista-lilac-stem", "stem_color", one_of("lilac", "purple", "violet", "blue-lilac"), STRONG, True, "Wood Blewit has a distinctive lilac/violet stem"),
    ("lepista-no-ring", "ring_present", equals(False), STRONG, True, "Lepista does not have a ring"),
    ("lepista-woodland", "habitat", one_of("woodland", "garden", "hedgerow"), MODERATE, True, "Lepista often found in woodland, gardens, and hedgerows"),
    ("lepista-perfumed-smell", "smell", one_of("perfumed", "floral", "sweet"), MODERATE, True, "Wood Blewit has a distinctive perfumed/floral smell"),
    ("lepista-season", "season_month", in_range(10, 12), MODERATE, True, "Lepista is a late-season mushroom, October-December"),
    ("lepista-pink-spore", "spore_print_color", one_of("pink", "pale pink", "pinkish"), MODERATE, True, "Lepista has a pale pink spore print"),
    ("lepista-exclude-pores", "gill_type", equals("pores"), EXCLUSIONARY, False, "Pores rule out Lepista"),
    ("lepista-exclude-ring", "ring_present", equals(True), EXCLUSIONARY, False, "A ring rules out Lepista"),
)

STRUCTURED_RULES: Tuple[FeatureRule, ...] = tuple(_rules)
del _rules
