from types import MappingProxyType

ACCEPTED_MATERIALS = MappingProxyType({
    "Cardboard": ("cardboard", "corrugated", "boxes"),
    "Paper": ("paper", "office paper", "junk mail", "mail"),
    "Newspaper": ("newspaper", "newspapers", "newsprint"),
    "Magazines": ("magazines", "catalogs", "catalogues"),
    "Aluminum Cans": ("aluminum cans", "aluminum", "soda cans", "beer cans"),
    "Glass Bottles": ("glass bottles", "glass jars", "glass containers"),
    "Glass": ("glass",),
    "Plastic Bottles": ("plastic bottles", "water bottles", "soda bottles"),
    "Plastic Containers": ("plastic containers", "plastic tubs", "plastic jugs"),
    "Metal Cans": ("metal cans", "tin cans", "steel cans", "food cans"),
    "Cartons": ("cartons", "milk cartons", "juice cartons", "beverage cartons"),
    "Rigid Plastics": ("rigid plastics", "hard plastics", "plastic #1", "plastic #2", "pete", "hdpe"),
})

NOT_ACCEPTED_MATERIALS = MappingProxyType({
    "Plastic Bags": ("plastic bags", "grocery bags", "shopping bags", "film plastic"),
    "Styrofoam": ("styrofoam", "polystyrene", "foam", "packing peanuts"),
    "Food Waste": ("food waste", "food scraps", "food-soiled", "food contaminated"),
    "Electronics": ("electronics", "e-waste", "computers", "phones", "tvs"),
    "Batteries": ("batteries", "battery"),
    "Hazardous Waste": ("hazardous", "toxic", "chemicals", "pesticides"),
    "Yard Waste": ("yard waste", "grass clippings", "leaves", "branches"),
    "Textiles": ("textiles", "clothing", "clothes", "fabric"),
    "Diapers": ("diapers", "sanitary products"),
    "Ceramics": ("ceramics", "pottery", "dishes", "china"),
    "Mirrors": ("mirrors", "window glass", "broken glass"),
    "Light Bulbs": ("light bulbs", "bulbs", "fluorescent"),
    "Tanglers": ("hoses", "cords", "wires", "chains", "tanglers"),
    "Scrap Metal": ("scrap metal", "large metal", "metal furniture"),
})

REJECTION_MARKERS = (
    "not accepted", "do not", "don't", "cannot", "no ", "never", "prohibited", "banned",
)

# Matched synonyms containing one of these count as rejected without negating language.
ALWAYS_NOT_ACCEPTED = ("plastic bags", "styrofoam", "batteries", "electronics", "hazardous")
