"""Bundled country and major-city reference table."""
from typing import Dict, List, Sequence, Tuple

from zonemap.core.config import CITY_ZOOM
from zonemap.core.models import GazetteerEntry, PlaceKind, PlaceNames
from zonemap.gazetteers.base import GazetteerSource


# name, lat, lng, zoom, aliases
# Zoom tracks areal extent: 3-4 very large, 5 large, 6 default, 7-9 small.
COUNTRIES: Sequence[Tuple[str, float, float, int, Tuple[str, ...]]] = (
    # Middle East
    ("Lebanon", 33.8547, 35.8623, 8, ("لبنان",)),
    ("Syria", 34.8021, 38.9968, 7, ("سوريا", "Syrian Arab Republic")),
    ("Jordan", 30.5852, 36.2384, 7, ("الأردن",)),
    ("Israel", 31.0461, 34.8516, 8, ()),
    ("Palestine", 31.9466, 35.3027, 9, ("فلسطين",)),
    ("United Arab Emirates", 23.4241, 53.8478, 7, ("الإمارات", "UAE", "Emirates")),
    ("Kuwait", 29.3117, 47.4818, 8, ("الكويت",)),
    ("Qatar", 25.3548, 51.1839, 8, ("قطر",)),
    ("Bahrain", 26.0667, 50.5577, 9, ("البحرين",)),
    ("Saudi Arabia", 23.8859, 45.0792, 5, ("السعودية", "KSA")),
    ("Iraq", 33.2232, 43.6793, 6, ("العراق",)),
    ("Iran", 32.4279, 53.6880, 5, ("إيران", "Persia")),
    ("Oman", 21.4735, 55.9754, 6, ("سلطنة عمان",)),
    ("Yemen", 15.5527, 48.5164, 6, ("اليمن",)),
    ("Turkey", 38.9637, 35.2433, 6, ("تركيا", "Türkiye")),
    ("Egypt", 26.8206, 30.8025, 6, ("مصر",)),
    # Africa
    ("Morocco", 31.7917, -7.0926, 6, ("المغرب",)),
    ("Algeria", 28.0339, 1.6596, 5, ("الجزائر",)),
    ("Tunisia", 33.8869, 9.5375, 7, ("تونس",)),
    ("Libya", 26.3351, 17.2283, 5, ("ليبيا",)),
    ("Sudan", 12.8628, 30.2176, 5, ("السودان",)),
    ("Nigeria", 9.0820, 8.6753, 6, ()),
    ("Kenya", -0.0236, 37.9062, 6, ()),
    ("South Africa", -30.5595, 22.9375, 5, ("جنوب أفريقيا",)),
    # Europe
    ("United Kingdom", 55.3781, -3.4360, 5, ("المملكة المتحدة", "UK", "Great Britain", "Britain")),
    ("France", 46.2276, 2.2137, 6, ("فرنسا",)),
    ("Germany", 51.1657, 10.4515, 6, ("ألمانيا", "Deutschland")),
    ("Italy", 41.8719, 12.5674, 6, ("إيطاليا", "Italia")),
    ("Spain", 40.4637, -3.7492, 6, ("إسبانيا", "España")),
    ("Portugal", 39.3999, -8.2245, 7, ("البرتغال",)),
    ("Netherlands", 52.1326, 5.2913, 7, ("هولندا", "Holland")),
    ("Belgium", 50.5039, 4.4699, 8, ("بلجيكا",)),
    ("Switzerland", 46.8182, 8.2275, 8, ("سويسرا",)),
    ("Greece", 39.0742, 21.8243, 7, ("اليونان",)),
    ("Russia", 61.5240, 105.3188, 3, ("روسيا", "Russian Federation")),
    # Americas
    ("United States", 37.0902, -95.7129, 4, ("الولايات المتحدة", "USA", "US", "United States of America")),
    ("Canada", 56.1304, -106.3468, 3, ("كندا",)),
    ("Mexico", 23.6345, -102.5528, 5, ("المكسيك", "México")),
    ("Brazil", -14.2350, -51.9253, 4, ("البرازيل", "Brasil")),
    ("Argentina", -38.4161, -63.6167, 5, ("الأرجنتين",)),
    # Asia & Oceania
    ("China", 35.8617, 104.1954, 4, ("الصين",)),
    ("India", 20.5937, 78.9629, 5, ("الهند",)),
    ("Japan", 36.2048, 138.2529, 6, ("اليابان",)),
    ("Thailand", 15.8700, 100.9925, 6, ("تايلاند",)),
    ("Singapore", 1.3521, 103.8198, 11, ("سنغافورة",)),
    ("Australia", -25.2744, 133.7751, 4, ("أستراليا",)),
)

# country -> (name, lat, lng, aliases)
CITIES_BY_COUNTRY: Dict[str, Sequence[Tuple[str, float, float, Tuple[str, ...]]]] = {
    "Lebanon": (
        ("Beirut", 33.8938, 35.5018, ("بيروت",)),
        ("Tripoli", 34.4367, 35.8497, ("طرابلس",)),
        ("Sidon", 33.5571, 35.3729, ("صيدا", "Saida")),
        ("Tyre", 33.2705, 35.2038, ("صور", "Sour")),
        ("Baalbek", 34.0047, 36.2110, ("بعلبك",)),
        ("Jounieh", 33.9808, 35.6178, ("جونية",)),
        ("Zahle", 33.8463, 35.9020, ("زحلة",)),
    ),
    "Syria": (
        ("Damascus", 33.5138, 36.2765, ("دمشق",)),
        ("Aleppo", 36.2021, 37.1343, ("حلب",)),
        ("Homs", 34.7324, 36.7137, ("حمص",)),
        ("Hama", 35.1318, 36.7578, ("حماة",)),
        ("Latakia", 35.5317, 35.7901, ("اللاذقية",)),
        ("Raqqa", 35.9594, 39.0078, ("الرقة",)),
        ("Deir ez-Zor", 35.3359, 40.1408, ("دير الزور",)),
        ("Idlib", 35.9306, 36.6339, ("إدلب",)),
        ("Al-Hasakah", 36.5024, 40.7477, ("الحسكة",)),
        ("Daraa", 32.6189, 36.1021, ("درعا",)),
    ),
    "Jordan": (
        ("Amman", 31.9454, 35.9284, ("عمّان",)),
        ("Zarqa", 32.0728, 36.0880, ("الزرقاء",)),
        ("Irbid", 32.5568, 35.8469, ("إربد",)),
        ("Aqaba", 29.5320, 35.0063, ("العقبة",)),
    ),
    "United Arab Emirates": (
        ("Dubai", 25.2048, 55.2708, ("دبي",)),
        ("Abu Dhabi", 24.4539, 54.3773, ("أبوظبي",)),
        ("Sharjah", 25.3463, 55.4209, ("الشارقة",)),
        ("Ajman", 25.4052, 55.5136, ("عجمان",)),
        ("Al Ain", 24.1302, 55.8023, ("العين",)),
        ("Ras Al Khaimah", 25.8007, 55.9762, ("رأس الخيمة",)),
        ("Fujairah", 25.1288, 56.3265, ("الفجيرة",)),
        ("Umm Al Quwain", 25.5647, 55.5552, ("أم القيوين",)),
    ),
    "Kuwait": (
        ("Kuwait City", 29.3759, 47.9774, ("مدينة الكويت",)),
    ),
    "Qatar": (
        ("Doha", 25.2854, 51.5310, ("الدوحة",)),
    ),
    "Bahrain": (
        ("Manama", 26.2285, 50.5860, ("المنامة",)),
    ),
    "Saudi Arabia": (
        ("Riyadh", 24.7136, 46.6753, ("الرياض",)),
        ("Jeddah", 21.4858, 39.1925, ("جدة", "Jiddah")),
        ("Mecca", 21.3891, 39.8579, ("مكة", "Makkah")),
        ("Medina", 24.5247, 39.5692, ("المدينة المنورة",)),
        ("Dammam", 26.4207, 50.0888, ("الدمام",)),
    ),
    "Iraq": (
        ("Baghdad", 33.3152, 44.3661, ("بغداد",)),
        ("Basra", 30.5085, 47.7804, ("البصرة",)),
        ("Mosul", 36.3489, 43.1577, ("الموصل",)),
        ("Erbil", 36.1911, 44.0092, ("أربيل",)),
    ),
    "Turkey": (
        ("Istanbul", 41.0082, 28.9784, ("إسطنبول",)),
        ("Ankara", 39.9334, 32.8597, ("أنقرة",)),
        ("Izmir", 38.4237, 27.1428, ("إزمير",)),
    ),
    "Egypt": (
        ("Cairo", 30.0444, 31.2357, ("القاهرة",)),
        ("Alexandria", 31.2001, 29.9187, ("الإسكندرية",)),
        ("Giza", 30.0131, 31.2089, ("الجيزة",)),
        ("Luxor", 25.6872, 32.6396, ("الأقصر",)),
    ),
    "Morocco": (
        ("Casablanca", 33.5731, -7.5898, ("الدار البيضاء",)),
        ("Rabat", 34.0209, -6.8416, ("الرباط",)),
        ("Marrakesh", 31.6295, -7.9811, ("مراكش", "Marrakech")),
    ),
    "United Kingdom": (
        ("London", 51.5074, -0.1278, ("لندن",)),
        ("Birmingham", 52.4862, -1.8904, ()),
        ("Manchester", 53.4808, -2.2426, ()),
        ("Liverpool", 53.4084, -2.9916, ()),
        ("Glasgow", 55.8642, -4.2518, ()),
        ("Edinburgh", 55.9533, -3.1883, ()),
    ),
    "France": (
        ("Paris", 48.8566, 2.3522, ("باريس",)),
        ("Marseille", 43.2965, 5.3698, ()),
        ("Lyon", 45.7640, 4.8357, ()),
        ("Toulouse", 43.6047, 1.4442, ()),
        ("Nice", 43.7102, 7.2620, ()),
    ),
    "Germany": (
        ("Berlin", 52.5200, 13.4050, ("برلين",)),
        ("Hamburg", 53.5511, 9.9937, ()),
        ("Munich", 48.1351, 11.5820, ("München",)),
        ("Cologne", 50.9375, 6.9603, ("Köln",)),
        ("Frankfurt", 50.1109, 8.6821, ()),
    ),
    "Italy": (
        ("Rome", 41.9028, 12.4964, ("روما", "Roma")),
        ("Milan", 45.4642, 9.1900, ("Milano",)),
        ("Naples", 40.8518, 14.2681, ("Napoli",)),
    ),
    "Spain": (
        ("Madrid", 40.4168, -3.7038, ("مدريد",)),
        ("Barcelona", 41.3874, 2.1686, ()),
        ("Valencia", 39.4699, -0.3763, ()),
    ),
    "Russia": (
        ("Moscow", 55.7558, 37.6173, ("موسكو", "Moskva")),
        ("Saint Petersburg", 59.9311, 30.3609, ("St Petersburg",)),
    ),
    "United States": (
        ("New York", 40.7128, -74.0060, ("نيويورك", "NYC")),
        ("Los Angeles", 34.0522, -118.2437, ("LA",)),
        ("Chicago", 41.8781, -87.6298, ()),
        ("Houston", 29.7604, -95.3698, ()),
        ("Miami", 25.7617, -80.1918, ()),
        ("Boston", 42.3601, -71.0589, ()),
        ("Seattle", 47.6062, -122.3321, ()),
        ("Washington", 38.9072, -77.0369, ("Washington DC",)),
    ),
    "Canada": (
        ("Toronto", 43.6532, -79.3832, ("تورنتو",)),
        ("Montreal", 45.5017, -73.5673, ("Montréal",)),
        ("Vancouver", 49.2827, -123.1207, ()),
        ("Ottawa", 45.4215, -75.6972, ()),
    ),
    "Mexico": (
        ("Mexico City", 19.4326, -99.1332, ("CDMX",)),
        ("Guadalajara", 20.6597, -103.3496, ()),
        ("Monterrey", 25.6866, -100.3161, ()),
    ),
    "Brazil": (
        ("Sao Paulo", -23.5505, -46.6333, ("São Paulo",)),
        ("Rio de Janeiro", -22.9068, -43.1729, ()),
        ("Brasilia", -15.7975, -47.8919, ("Brasília",)),
    ),
    "Argentina": (
        ("Buenos Aires", -34.6037, -58.3816, ()),
        ("Cordoba", -31.4201, -64.1888, ("Córdoba",)),
    ),
    "South Africa": (
        ("Johannesburg", -26.2041, 28.0473, ()),
        ("Cape Town", -33.9249, 18.4241, ()),
    ),
    "China": (
        ("Beijing", 39.9042, 116.4074, ("بكين", "Peking")),
        ("Shanghai", 31.2304, 121.4737, ()),
        ("Guangzhou", 23.1291, 113.2644, ()),
    ),
    "India": (
        ("Delhi", 28.7041, 77.1025, ("New Delhi",)),
        ("Mumbai", 19.0760, 72.8777, ("Bombay",)),
        ("Bangalore", 12.9716, 77.5946, ("Bengaluru",)),
    ),
    "Japan": (
        ("Tokyo", 35.6762, 139.6503, ("طوكيو",)),
        ("Osaka", 34.6937, 135.5023, ()),
        ("Kyoto", 35.0116, 135.7681, ()),
    ),
    "Thailand": (
        ("Bangkok", 13.7563, 100.5018, ()),
    ),
    "Singapore": (
        ("Singapore", 1.2903, 103.8520, ()),
    ),
    "Australia": (
        ("Sydney", -33.8688, 151.2093, ("سيدني",)),
        ("Melbourne", -37.8136, 144.9631, ()),
        ("Brisbane", -27.4698, 153.0251, ()),
    ),
}


class BuiltinSource(GazetteerSource):
    """Reference table shipped with the package."""

    def __init__(self, city_zoom: int = CITY_ZOOM):
        self.city_zoom = city_zoom

    def load_entries(self) -> List[GazetteerEntry]:
        entries = [
            GazetteerEntry(
                names=PlaceNames(name, aliases),
                lat=lat,
                lng=lng,
                kind=PlaceKind.COUNTRY,
                default_zoom=zoom,
            )
            for name, lat, lng, zoom, aliases in COUNTRIES
        ]
        for country, cities in CITIES_BY_COUNTRY.items():
            for name, lat, lng, aliases in cities:
                entries.append(GazetteerEntry(
                    names=PlaceNames(name, aliases),
                    lat=lat,
                    lng=lng,
                    kind=PlaceKind.CITY,
                    default_zoom=self.city_zoom,
                    country=country,
                ))
        return entries

    def get_name(self) -> str:
        return "Builtin Gazetteer"
