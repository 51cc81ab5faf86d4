# pressure_dashboard/utils/mask_value.py
def mask_value(value: str) -> str:
    """Keep the first and last character, star out the rest."""
    if len(value) <= 2:
        return value
    return f"{value[0]}{'*' * (len(value) - 2)}{value[-1]}"
