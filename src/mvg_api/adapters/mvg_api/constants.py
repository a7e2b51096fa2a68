"""Constants for the MVG API adapter.

The API is unofficial and undocumented; URLs and field names may change
without notice. No authentication required.
"""

MVG_BASE_URL = "https://www.mvg.de"

# Journey planner ("fib") endpoints
MVG_LOCATION_URL = f"{MVG_BASE_URL}/api/fib/v2/location"  # GET ?query=...
MVG_STATION_NEARBY_URL = f"{MVG_BASE_URL}/api/fib/v2/station/nearby"  # GET ?latitude=&longitude=
MVG_DEPARTURE_URL = f"{MVG_BASE_URL}/api/fib/v2/departure"  # GET ?globalId=...

# Static network data ("zdm") endpoints
MVG_STATIONS_URL = f"{MVG_BASE_URL}/.rest/zdm/stations"
MVG_STATION_GLOBAL_IDS_URL = f"{MVG_BASE_URL}/.rest/zdm/mvgStationGlobalIds"
MVG_LINES_URL = f"{MVG_BASE_URL}/.rest/zdm/lines"

# HTTP headers
DEFAULT_HEADERS = {
    "accept": "application/json",
}
