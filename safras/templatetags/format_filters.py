from django import template
import decimal

register = template.Library()


@register.filter(name='formato_br')
def formato_br(value, decimal_places=2):
    """
    Formata um número para o padrão brasileiro: 1.234,56
    """
    if value is None or value == '':
        return '0,00'

    try:
        if isinstance(value, str):
            value = value.replace(',', '.')

        number = decimal.Decimal(str(value))

        # '{:,.2f}' usa vírgula para milhar e ponto para decimal; trocamos para o padrão BR
        formatted = "{:,.{}f}".format(number, int(decimal_places))

        parts = formatted.split('.')
        main_part = parts[0].replace(',', '.')
        if len(parts) == 1:
            return main_part
        return f"{main_part},{parts[1]}"

    except (ValueError, decimal.InvalidOperation, TypeError, IndexError):
        return value


@register.filter(name='moeda_br')
def moeda_br(value):
    """Formata como moeda: R$ 1.234,56 (negativos como -R$ 1.234,56)."""
    formatted = formato_br(value)
    if not isinstance(formatted, str) or formatted == value:
        return value
    if formatted.startswith('-'):
        return f"-R$ {formatted[1:]}"
    return f"R$ {formatted}"

