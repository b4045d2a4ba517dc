from __future__ import annotations

# http://api.worldbank.org/v2/countries/US/indicators/NY.GNP.PCAP.CD?date=1990:1997&format=json
GNI_VALUES = {
    "1997": 31270,
    "1996": 30270,
    "1995": 29040,
    "1994": 27650,
    "1993": 26390,
    "1992": 25680,
    "1991": 24270,
    "1990": 24060,
}


def observation(indicator: str, iso2c: str | None, name: str | None, date: str, value) -> dict:
    return {
        "indicator": {"id": indicator, "value": indicator},
        "country": {"id": iso2c, "value": name},
        "countryiso3code": "",
        "date": date,
        "value": value,
        "unit": "",
        "obs_status": "",
        "decimal": 0,
    }


def envelope(records) -> list:
    return [{"page": 1, "pages": 1, "per_page": 25000, "total": len(records or [])}, records]


def country(iso3c, iso2c, name, region="Latin America & Caribbean", longitude="-47.9292", latitude="-15.7801") -> dict:
    return {
        "id": iso3c,
        "iso2Code": iso2c,
        "name": name,
        "region": {"id": "LCN", "iso2code": "ZJ", "value": region},
        "adminregion": {"id": "", "iso2code": "", "value": ""},
        "incomeLevel": {"id": "UMC", "iso2code": "XT", "value": "Upper middle income"},
        "lendingType": {"id": "IBD", "iso2code": "XF", "value": "IBRD"},
        "capitalCity": "Brasilia",
        "longitude": longitude,
        "latitude": latitude,
    }
