from pathlib import Path
import datetime

# Paths
DATA_DIR = Path("data")
GEOJSON_PATH = DATA_DIR / "us-states.geojson"
# Fetched when GEOJSON_PATH is not on disk
GEOJSON_URL = "https://raw.githubusercontent.com/PublicaMundi/MappingAPI/master/data/geojson/us-states.json"
METRICS_PATH = DATA_DIR / "2008_data.json"
POPULATION_CSV = DATA_DIR / "ca_population.csv"
OUT_DIR = Path("docs")
PLOTS_DST = OUT_DIR / "plots"
POPULATION_PNG = "population_trend.png"
ARROWS_CSV = "flow_arrows.csv"

# Seconds to wait for a remote data file
FETCH_TIMEOUT = 30

# timestamp used in footers (UTC at build time)
LAST_UPDATED = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

FOOTER_TEXT = (
    "Migration data: state-to-state migration flows, 2008.<br />\n"
    "Population data: annual California estimates, 2010-2022."
)
