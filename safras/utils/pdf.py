"""
Geração de PDF a partir de templates HTML (xhtml2pdf).
"""

import logging
from io import BytesIO

from django.template.loader import get_template
from xhtml2pdf import pisa

logger = logging.getLogger(__name__)


def render_to_pdf(template_src, context_dict=None):
    """
    Renderiza o template e converte para PDF.
    Retorna os bytes do PDF ou None se a conversão falhar.
    """
    template = get_template(template_src)
    html = template.render(context_dict or {})
    result = BytesIO()
    pdf = pisa.CreatePDF(html, dest=result, encoding="UTF-8")
    if pdf.err:
        logger.error(f"Erro ao converter {template_src} para PDF ({pdf.err} erro(s)).")
        return None
    return result.getvalue()
