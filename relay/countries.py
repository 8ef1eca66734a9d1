"""ISO 3166-1 alpha-2 country codes and the display names shown to clients.

ORCID stores a researcher's address as a bare two-letter code; clients want
something readable. Unknown codes pass through untouched.
"""

from __future__ import annotations

from typing import Optional

#: Display name keyed by upper-case alpha-2 code.
COUNTRY_NAMES: dict[str, str] = {
    "GB": "United Kingdom",
    "US": "United States",
    "CA": "Canada",
    "AU": "Australia",
    "DE": "Germany",
    "FR": "France",
    "ES": "Spain",
    "IT": "Italy",
    "CN": "China",
    "JP": "Japan",
    "IN": "India",
    "BR": "Brazil",
    "MX": "Mexico",
    "RU": "Russia",
    "ZA": "South Africa",
    "EG": "Egypt",
    "MA": "Morocco",
    "TR": "Turkey",
    "GR": "Greece",
    "PT": "Portugal",
    "NL": "Netherlands",
    "SE": "Sweden",
    "NO": "Norway",
    "DK": "Denmark",
    "FI": "Finland",
    "PL": "Poland",
    "CZ": "Czech Republic",
    "HU": "Hungary",
    "AT": "Austria",
    "CH": "Switzerland",
    "BE": "Belgium",
    "IE": "Ireland",
    "NZ": "New Zealand",
    "AR": "Argentina",
    "CL": "Chile",
    "PE": "Peru",
    "CO": "Colombia",
    "VE": "Venezuela",
    "UY": "Uruguay",
    "PY": "Paraguay",
    "BO": "Bolivia",
    "EC": "Ecuador",
    "CR": "Costa Rica",
    "GT": "Guatemala",
    "HN": "Honduras",
    "SV": "El Salvador",
    "NI": "Nicaragua",
    "PA": "Panama",
    "CU": "Cuba",
    "DO": "Dominican Republic",
    "HT": "Haiti",
    "JM": "Jamaica",
    "TT": "Trinidad and Tobago",
    "BB": "Barbados",
    "BS": "Bahamas",
    "BZ": "Belize",
    "SR": "Suriname",
    "GY": "Guyana",
    "FK": "Falkland Islands",
    "GF": "French Guiana",
    "GP": "Guadeloupe",
    "MQ": "Martinique",
    "AW": "Aruba",
    "CW": "Curaçao",
    "SX": "Sint Maarten",
    "BQ": "Caribbean Netherlands",
    "KY": "Cayman Islands",
    "TC": "Turks and Caicos Islands",
    "VG": "British Virgin Islands",
    "VI": "U.S. Virgin Islands",
    "PR": "Puerto Rico",
    "AG": "Antigua and Barbuda",
    "KN": "Saint Kitts and Nevis",
    "LC": "Saint Lucia",
    "VC": "Saint Vincent and the Grenadines",
    "GD": "Grenada",
    "DM": "Dominica",
    "MS": "Montserrat",
    "AI": "Anguilla",
    "MF": "Saint Martin",
    "BL": "Saint Barthélemy",
    "PM": "Saint Pierre and Miquelon",
    "GL": "Greenland",
    "FO": "Faroe Islands",
    "GI": "Gibraltar",
    "AD": "Andorra",
    "LI": "Liechtenstein",
    "SM": "San Marino",
    "VA": "Vatican City",
    "MC": "Monaco",
    "LU": "Luxembourg",
    "IS": "Iceland",
    "MT": "Malta",
    "CY": "Cyprus",
    "AL": "Albania",
    "MK": "North Macedonia",
    "RS": "Serbia",
    "ME": "Montenegro",
    "BA": "Bosnia and Herzegovina",
    "HR": "Croatia",
    "SI": "Slovenia",
    "SK": "Slovakia",
    "EE": "Estonia",
    "LV": "Latvia",
    "LT": "Lithuania",
    "BY": "Belarus",
    "UA": "Ukraine",
    "MD": "Moldova",
    "AM": "Armenia",
    "GE": "Georgia",
    "AZ": "Azerbaijan",
    "KZ": "Kazakhstan",
    "KG": "Kyrgyzstan",
    "UZ": "Uzbekistan",
    "TM": "Turkmenistan",
    "TJ": "Tajikistan",
    "MN": "Mongolia",
    "KR": "South Korea",
    "KP": "North Korea",
    "VN": "Vietnam",
    "TH": "Thailand",
    "SG": "Singapore",
    "MY": "Malaysia",
    "ID": "Indonesia",
    "PH": "Philippines",
    "BN": "Brunei",
    "TL": "Timor-Leste",
    "KH": "Cambodia",
    "LA": "Laos",
    "MM": "Myanmar",
    "BD": "Bangladesh",
    "LK": "Sri Lanka",
    "MV": "Maldives",
    "BT": "Bhutan",
    "NP": "Nepal",
    "PK": "Pakistan",
    "AF": "Afghanistan",
    "IR": "Iran",
    "IQ": "Iraq",
    "SY": "Syria",
    "JO": "Jordan",
    "LB": "Lebanon",
    "IL": "Israel",
    "PS": "Palestine",
    "AE": "United Arab Emirates",
    "SA": "Saudi Arabia",
    "YE": "Yemen",
    "OM": "Oman",
    "QA": "Qatar",
    "KW": "Kuwait",
    "BH": "Bahrain",
    "TN": "Tunisia",
    "DZ": "Algeria",
    "LY": "Libya",
    "SD": "Sudan",
    "SS": "South Sudan",
    "EH": "Western Sahara",
    "MR": "Mauritania",
    "ML": "Mali",
    "NE": "Niger",
    "TD": "Chad",
    "BF": "Burkina Faso",
    "BJ": "Benin",
    "TG": "Togo",
    "CI": "Côte d'Ivoire",
    "GH": "Ghana",
    "SN": "Senegal",
    "GM": "Gambia",
    "GN": "Guinea",
    "GW": "Guinea-Bissau",
    "SL": "Sierra Leone",
    "LR": "Liberia",
    "NG": "Nigeria",
    "CM": "Cameroon",
    "CF": "Central African Republic",
    "GA": "Gabon",
    "CG": "Republic of the Congo",
    "CD": "Democratic Republic of the Congo",
    "AO": "Angola",
    "ZM": "Zambia",
    "MW": "Malawi",
    "MZ": "Mozambique",
    "ZW": "Zimbabwe",
    "BW": "Botswana",
    "NA": "Namibia",
    "SZ": "Eswatini",
    "LS": "Lesotho",
    "MG": "Madagascar",
    "MU": "Mauritius",
    "SC": "Seychelles",
    "KM": "Comoros",
    "CV": "Cape Verde",
    "ST": "São Tomé and Príncipe",
    "BI": "Burundi",
    "RW": "Rwanda",
    "UG": "Uganda",
    "TZ": "Tanzania",
    "KE": "Kenya",
    "ET": "Ethiopia",
    "ER": "Eritrea",
    "DJ": "Djibouti",
    "SO": "Somalia",
}


def resolve_country(code: Optional[str]) -> Optional[str]:
    """Return the display name for *code*.

    Args:
        code: A two-letter country code as found in an ORCID address.

    Returns:
        The display name, *code* unchanged when it is not in the table, or
        ``None`` when *code* is empty.

    Examples:
        >>> resolve_country("GB")
        'United Kingdom'
        >>> resolve_country("XX")
        'XX'
    """
    if not code:
        return None
    return COUNTRY_NAMES.get(code.strip().upper(), code)
