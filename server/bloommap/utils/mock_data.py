# server/bloommap/utils/mock_data.py
#
# Datos fijos para desarrollo: semilla del almacén, catálogo de especies,
# ubicaciones y overlays de prueba.

from typing import Dict, List

# -------------------------------------------------------------------
# Semilla por defecto del almacén de ubicaciones (IDs 1-3)
# -------------------------------------------------------------------
SEED_LOCATIONS: List[Dict] = [
    {
        "id": 1,
        "speciesId": 1,
        "locationName": "Vườn hoa Nguyễn Huệ",
        "coordinates": [106.7008, 10.7769],
        "bloomingPeriod": {"start": "2024-02-01", "peak": "2024-02-15", "end": "2024-03-15"},
    },
    {
        "id": 2,
        "speciesId": 2,
        "locationName": "Công viên Tao Đàn",
        "coordinates": [106.6947, 10.7881],
        "bloomingPeriod": {"start": "2024-01-15", "peak": "2024-02-01", "end": "2024-02-28"},
    },
    {
        "id": 3,
        "speciesId": 1,
        "locationName": "Vườn hoa Lý Tự Trọng",
        "coordinates": [106.692, 10.7756],
        "bloomingPeriod": {"start": "2024-02-10", "peak": "2024-02-25", "end": "2024-03-20"},
    },
]


# -------------------------------------------------------------------
# Catálogo de especies
# -------------------------------------------------------------------
def _species(species_id: int, name: str, scientific: str, description: str, image: str,
             bloom_time: str, color: str, habitat: str, characteristics: str) -> Dict:
    return {
        "id": species_id,
        "speciesId": species_id,
        "name": name,
        "scientificName": scientific,
        "description": description,
        "imageUrl": image,
        "bloomTime": bloom_time,
        "color": color,
        "habitat": habitat,
        "characteristics": characteristics,
    }


_INAT = "https://inaturalist-open-data.s3.amazonaws.com/photos"

MOCK_SPECIES: List[Dict] = [
    _species(
        59549, "Large-leaved lupine", "Lupinus polyphyllus",
        "http://en.wikipedia.org/wiki/Lupinus_polyphyllus",
        f"{_INAT}/135866080/medium.jpg",
        "Late Spring to Summer (May-September)",
        "Purple, blue, pink, white, or combinations thereof",
        "Roadsides, meadows, woodland clearings, and disturbed areas. Often found in moist, well-drained soils.",
        "Tall plant with a prominent flower spike, palmate leaves with 9-17 leaflets, nitrogen-fixing capabilities.",
    ),
    _species(
        49564, "Texas bluebonnet", "Lupinus texensis",
        "http://en.wikipedia.org/wiki/Lupinus_texensis",
        f"{_INAT}/1447028/medium.JPG",
        "Spring (March-May)",
        "Blue, with a white tip (sometimes pink or maroon)",
        "Well-drained sandy or gravelly soils, roadsides, pastures, and open fields of Central Texas",
        "Showy racemes of blue flowers, five-petaled, the 'banner' petal often having a white tip "
        "that may turn reddish-purple with age, important for attracting pollinators, state flower of Texas",
    ),
    _species(
        50614, "Miniature Lupine", "Lupinus bicolor",
        "http://en.wikipedia.org/wiki/Lupinus_bicolor",
        f"{_INAT}/184064245/medium.jpg",
        "Spring",
        "Blue, Purple, White",
        "Open, disturbed areas, grasslands, coastal scrub, chaparral",
        "Small annual herb, often with a bicolored flower (standard usually white, wings blue or purple), palmate leaves",
    ),
    _species(
        61010, "coastal bush lupine", "Lupinus arboreus",
        "http://en.wikipedia.org/wiki/Lupinus_arboreus",
        f"{_INAT}/120260472/medium.jpg",
        "Spring to Summer",
        "Yellow, sometimes cream or blue",
        "Coastal dunes, scrubland, disturbed areas, often near the coast",
        "Shrubby habit, nitrogen-fixing properties, rapid growth, can be invasive",
    ),
    _species(
        62691, "silvery lupine", "Lupinus argenteus",
        "http://en.wikipedia.org/wiki/Lupinus_argenteus",
        f"{_INAT}/18421301/medium.jpg",
        "Late Spring to Late Summer (May-September)",
        "Blue, Purple, Pink, White",
        "Sagebrush steppe, Ponderosa Pine forests, Mountain meadows, Dry open areas, Woodlands",
        "Silvery-green foliage, densely hairy stems and leaves, variable flower color, nitrogen-fixing capabilities",
    ),
    _species(
        48225, "California poppy", "Eschscholzia californica",
        "http://en.wikipedia.org/wiki/Eschscholzia_californica",
        f"{_INAT}/67227218/medium.jpg",
        "Spring to Summer (February - September)",
        "Orange, Yellow, Reddish-Orange, rarely Pink or White",
        "Grasslands, open areas, disturbed sites, chaparral, coastal dunes, and foothills",
        "Cup-shaped flowers, bluish-green foliage, drought-tolerant, self-seeding",
    ),
    _species(
        50987, "California goldfields", "Lasthenia californica",
        "http://en.wikipedia.org/wiki/Lasthenia_californica",
        f"{_INAT}/7229972/medium.jpeg",
        "Spring",
        "Yellow",
        "Grasslands, vernal pools, coastal meadows, disturbed areas",
        "Forms extensive carpets of bright yellow flowers, annual herb, tolerant of serpentine soils.",
    ),
    _species(
        542062, "Rock Purslane", "Cistanthe grandiflora",
        "",
        f"{_INAT}/355482388/medium.jpg",
        "Summer",
        "Rose-pink to magenta",
        "Rocky slopes and cliffs, especially in California and Oregon",
        "Succulent perennial with large, showy flowers; drought-tolerant",
    ),
    _species(
        76661, "trailing African daisy", "Dimorphotheca fruticosa",
        "https://en.wikipedia.org/wiki/Dimorphotheca_fruticosa",
        f"{_INAT}/195549687/medium.jpg",
        "Year-round",
        "Yellow",
        "Coastal regions, sand dunes, disturbed areas",
        "Drought-tolerant, low-growing shrub, suitable for ground cover, attracts pollinators",
    ),
    _species(
        76660, "blue-and-white daisybush", "Dimorphotheca ecklonis",
        "http://en.wikipedia.org/wiki/Dimorphotheca_ecklonis",
        f"{_INAT}/15848074/medium.jpg",
        "Spring to Autumn",
        "White, Purple, Yellow",
        "Grasslands, Coastal areas, Disturbed ground",
        "Drought-tolerant, attracts pollinators, forms a dense shrub",
    ),
    _species(
        76662, "Cape marigold", "Dimorphotheca sinuata",
        "http://en.wikipedia.org/wiki/Dimorphotheca_sinuata",
        f"{_INAT}/6486656/medium.jpeg",
        "Spring",
        "Orange, Yellow, White (with a dark central disc)",
        "Sandy or gravelly soils, often in disturbed areas or along roadsides",
        "Annual herb, showy daisy-like flowers, drought-tolerant",
    ),
    _species(
        119207, "rain daisy", "Dimorphotheca pluvialis",
        "http://en.wikipedia.org/wiki/Dimorphotheca_pluvialis",
        f"{_INAT}/97754149/medium.jpg",
        "Spring",
        "White with a yellow center, sometimes pale yellow or cream",
        "Sandy flats, coastal dunes, and disturbed areas in the Western Cape of South Africa",
        "Flowers close on cloudy days and at night, ray florets are typically white with purple "
        "undersides, disc florets are yellow.",
    ),
    _species(
        569596, "Cape daisy", "Dimorphotheca jucunda",
        "https://en.wikipedia.org/wiki/Dimorphotheca_jucunda",
        f"{_INAT}/12207464/medium.jpeg",
        "Spring",
        "Purple-pink with a darker center",
        "Rocky slopes and grasslands",
        "Drought-tolerant, forms mats, flowers open in sunlight and close in shade",
    ),
    _species(
        50164, "desert sand verbena", "Abronia villosa",
        "http://en.wikipedia.org/wiki/Abronia_villosa",
        f"{_INAT}/117389013/medium.jpg",
        "Spring (primarily March-May)",
        "Magenta to pink, sometimes white or purple",
        "Sandy deserts, dunes, and washes",
        "Fragrant, sticky leaves and stems, prostrate growth habit, drought-tolerant, attracts pollinators",
    ),
]


# -------------------------------------------------------------------
# Ubicaciones de prueba (Vietnam + zona de Los Ángeles)
# -------------------------------------------------------------------
def _location(location_id: int, species_id: int, name: str, lon: float, lat: float,
              start: str, peak: str, end: str) -> Dict:
    return {
        "id": location_id,
        "speciesId": species_id,
        "locationName": name,
        "coordinates": [lon, lat],
        "bloomingPeriod": {"start": start, "peak": peak, "end": end},
    }


MOCK_LOCATIONS: List[Dict] = [
    _location(1, 50164, "Hanoi Cherry Garden", -118.44, 34.764, "2025-03-15", "2025-04-05", "2025-04-25"),
    _location(2, 1, "Hue Imperial City", 108.2022, 16.0545, "2025-03-10", "2025-03-30", "2025-04-20"),
    _location(3, 1, "Ho Chi Minh City Park", 106.6297, 10.8231, "2025-02-20", "2025-03-15", "2025-04-10"),
    _location(4, 2, "Dong Anh Sunflower Field", 105.6189, 21.0245, "2025-06-01", "2025-07-15", "2025-09-15"),
    _location(5, 2, "Quang Tri Sunflower Valley", 107.565, 16.4637, "2025-05-15", "2025-07-01", "2025-08-30"),
    _location(6, 2, "Binh Duong Sunflower Farm", 106.978, 10.8142, "2025-06-10", "2025-08-01", "2025-09-20"),
    _location(7, 3, "West Lake Lotus Pond", 105.8019, 20.9801, "2025-05-01", "2025-07-01", "2025-08-31"),
    _location(8, 3, "Perfume River Lotus", 108.1435, 16.4621, "2025-04-20", "2025-06-15", "2025-08-15"),
    _location(9, 3, "Mekong Delta Lotus Field", 105.7851, 10.0451, "2025-05-10", "2025-07-20", "2025-09-05"),
    _location(10, 4, "Da Lat Lavender Farm", 108.4265, 15.8742, "2025-06-15", "2025-07-20", "2025-08-30"),
    _location(11, 4, "Sapa Lavender Garden", 103.97, 22.4856, "2025-06-01", "2025-07-10", "2025-08-20"),
    _location(12, 5, "Hanoi Rose Garden", 105.8445, 21.0325, "2025-04-01", "2025-06-01", "2025-10-31"),
    _location(13, 5, "Hue Royal Rose Park", 108.2208, 16.0578, "2025-03-20", "2025-05-15", "2025-11-10"),
    _location(14, 5, "Saigon Rose Valley", 106.7009, 10.7756, "2025-04-10", "2025-06-20", "2025-10-20"),
    _location(15, 5, "Da Lat Rose Garden", 108.4582, 15.8654, "2025-03-25", "2025-05-30", "2025-11-05"),
    # Zona de Los Ángeles (-118.46 a -118.26, 34.66 a 34.8)
    _location(16, 1, "West Hollywood Cherry Park", -118.3648, 34.7184, "2025-03-01", "2025-03-20", "2025-04-15"),
    _location(17, 1, "Beverly Hills Cherry Grove", -118.4052, 34.7089, "2025-02-25", "2025-03-18", "2025-04-10"),
    _location(18, 1, "Sunset Strip Cherry Trees", -118.3851, 34.7381, "2025-03-05", "2025-03-25", "2025-04-20"),
    _location(19, 2, "Hollywood Hills Sunflower Field", -118.3395, 34.7095, "2025-07-01", "2025-08-15", "2025-09-30"),
    _location(20, 2, "Santa Monica Sunflower Meadow", -118.4345, 34.7278, "2025-06-20", "2025-08-01", "2025-09-20"),
    _location(21, 3, "Century City Lotus Pond", -118.4107, 34.7582, "2025-05-15", "2025-07-10", "2025-09-15"),
    _location(22, 3, "Fairfax Lotus Garden", -118.3653, 34.7491, "2025-05-01", "2025-06-25", "2025-08-30"),
    _location(23, 4, "Melrose Lavender Gardens", -118.3712, 34.6895, "2025-04-15", "2025-07-01", "2025-09-30"),
    _location(24, 4, "West Hollywood Lavender Park", -118.3801, 34.7136, "2025-04-20", "2025-06-30", "2025-10-15"),
    _location(25, 5, "Beverly Hills Rose Garden", -118.4087, 34.7181, "2025-04-01", "2025-06-15", "2025-11-30"),
    _location(26, 5, "Hollywood Rose Collection", -118.3348, 34.7394, "2025-03-20", "2025-05-25", "2025-11-15"),
    _location(27, 5, "Santa Monica Rose Gardens", -118.4323, 34.7548, "2025-03-15", "2025-05-20", "2025-11-10"),
]


# -------------------------------------------------------------------
# Overlays del mapa
# -------------------------------------------------------------------
_CHART_URLS = [
    "https://images.unsplash.com/photo-1522383225653-ed111181a951?w=600",
    "https://images.unsplash.com/photo-1545558014-8692077e9b5c?w=600",
    "https://media.giphy.com/media/26BRrSvJUa0crqw4E/giphy.gif",
    "https://images.unsplash.com/photo-1598300042247-d088f8ab3a91?w=600",
]


def _overlay(overlay_id: int, name: str, address: str, start: str, end: str,
             min_lon: float, max_lon: float, min_lat: float, max_lat: float) -> Dict:
    return {
        "id": overlay_id,
        "name": name,
        "address": address,
        "imageUrl": "/mask.svg",
        "startDate": start,
        "endDate": end,
        "reportUrl": "/exp.pdf",
        "chartUrls": list(_CHART_URLS),
        "bounds": {"minLon": min_lon, "maxLon": max_lon, "minLat": min_lat, "maxLat": max_lat},
    }


MOCK_OVERLAYS: List[Dict] = [
    _overlay(1, "Anza-Borrego Desert State Park, Antelope Valley", "California, USA",
             "2024-04-01", "2024-09-30", -118.44, -118.38, 34.764, 34.88),
    _overlay(2, "Carrizo Plain National Monument", "California, USA",
             "2017-04-01", "2017-04-30", -119.94, -119.74, 35.08, 35.18),
    _overlay(3, "Walker Canyon, Lake Elsinore", "California, USA",
             "2019-03-01", "2019-03-31", -117.41, -117.39, 33.72, 33.74),
    _overlay(4, "Anza-Borrego", "California, USA",
             "2019-02-01", "2019-02-28", -116.42, -116.38, 33.25, 33.26),
    _overlay(5, "Atacama Desert", "Chile",
             "2019-07-01", "2019-07-31", 69.42, 69.52, 23.84, 23.94),
    _overlay(6, "Namaqualand", "Namibia",
             "2019-05-01", "2019-05-31", 15.32, 15.42, 26.34, 26.44),
]


def seed_for(name: str) -> List[Dict]:
    """Semilla del almacén según BLOOMMAP_SEED."""
    seeds = {
        "default": SEED_LOCATIONS,
        "mock": MOCK_LOCATIONS,
        "empty": [],
    }
    if name not in seeds:
        raise ValueError(f"Semilla desconocida: {name!r} (usa default, mock o empty)")
    return [dict(item) for item in seeds[name]]
