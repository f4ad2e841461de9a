API_PREFIX = "/api"

# SQLite CURRENT_TIMESTAMP layout, so strftime() can read stored values.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

MONTH_NAMES = {
    "01": "Enero",
    "02": "Febrero",
    "03": "Marzo",
    "04": "Abril",
    "05": "Mayo",
    "06": "Junio",
    "07": "Julio",
    "08": "Agosto",
    "09": "Septiembre",
    "10": "Octubre",
    "11": "Noviembre",
    "12": "Diciembre",
}
