"""
Gestor de Safras - Modelos de Dados

Registros de fazendas, safras, operações de campo, custos, colheitas,
maquinário e benfeitorias.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Fazenda(models.Model):
    """
    Representa uma propriedade rural do produtor.
    Agrupa safras, maquinário e benfeitorias.
    """
    nome = models.CharField(max_length=100, verbose_name='Nome da Propriedade')
    localizacao = models.CharField(max_length=200, verbose_name='Localização (Município/UF)')
    produtor = models.CharField(max_length=200, blank=True, null=True, verbose_name='Nome do Produtor')
    latitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        verbose_name='Latitude'
    )
    longitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        verbose_name='Longitude'
    )

    class Meta:
        db_table = 'fazendas'
        verbose_name = 'Fazenda'
        verbose_name_plural = 'Fazendas'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class Safra(models.Model):
    """
    Representa um ciclo de cultivo (plantio até colheita) de uma cultura
    em uma área da fazenda.
    """
    fazenda = models.ForeignKey(
        Fazenda,
        on_delete=models.CASCADE,
        related_name='safras',
        verbose_name='Fazenda'
    )
    nome = models.CharField(max_length=100, verbose_name='Nome da Safra (Ex: Soja Verão 23/24)')
    cultura = models.CharField(max_length=100, verbose_name='Cultura', help_text='Ex: Soja, Milho, Trigo')
    variedade = models.CharField(max_length=100, verbose_name='Variedade')
    area = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        default=0,
        verbose_name='Área (ha)'
    )
    data_inicio = models.DateField(verbose_name='Data de Início')
    data_fim = models.DateField(blank=True, null=True, verbose_name='Data de Término')
    ativa = models.BooleanField(default=True, verbose_name='Safra Ativa?')

    class Meta:
        db_table = 'safras'
        verbose_name = 'Safra'
        verbose_name_plural = 'Safras'
        ordering = ['-data_inicio']

    def __str__(self):
        return f"{self.nome} ({self.area} ha)"

    def clean(self):
        if self.data_fim and self.data_inicio and self.data_fim < self.data_inicio:
            raise ValidationError({'data_fim': 'A data de término não pode ser anterior à data de início.'})

    @property
    def status_display(self):
        return 'Ativa' if self.ativa else 'Finalizada'


class AnaliseSolo(models.Model):
    """Análise de solo registrada no cadastro da safra."""
    safra = models.OneToOneField(
        Safra,
        on_delete=models.CASCADE,
        related_name='analise_solo',
        verbose_name='Safra'
    )
    ph = models.DecimalField(max_digits=5, decimal_places=2, verbose_name='pH em H₂O')
    fosforo = models.DecimalField(max_digits=8, decimal_places=2, verbose_name='Fósforo (P) (mg/dm³)')
    potassio = models.DecimalField(max_digits=8, decimal_places=2, verbose_name='Potássio (K) (mg/dm³)')
    materia_organica = models.DecimalField(max_digits=6, decimal_places=2, verbose_name='M.O. (%)')
    calcio = models.DecimalField(max_digits=8, decimal_places=2, verbose_name='Cálcio (Ca) (cmolc/dm³)')
    magnesio = models.DecimalField(max_digits=8, decimal_places=2, verbose_name='Magnésio (Mg) (cmolc/dm³)')
    aluminio = models.DecimalField(max_digits=8, decimal_places=2, verbose_name='Alumínio (Al) (cmolc/dm³)')
    saturacao_bases = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True, verbose_name='Sat. Bases (V%)')
    saturacao_aluminio = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True, verbose_name='Sat. Alumínio (m%)')
    ctc = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='CTC (cmolc/dm³)')
    enxofre = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Enxofre (S) (mg/dm³)')
    boro = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Boro (B) (mg/dm³)')
    cobre = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Cobre (Cu) (mg/dm³)')
    ferro = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Ferro (Fe) (mg/dm³)')
    manganes = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Manganês (Mn) (mg/dm³)')
    zinco = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True, verbose_name='Zinco (Zn) (mg/dm³)')

    class Meta:
        db_table = 'analises_solo'
        verbose_name = 'Análise de Solo'
        verbose_name_plural = 'Análises de Solo'

    def __str__(self):
        return f"Análise de solo - {self.safra.nome}"


class TipoOperacao(models.TextChoices):
    """Tipos de operações de campo."""
    PLANTIO = 'Plantio', 'Plantio'
    DEFENSIVO = 'Defensivo', 'Defensivo'
    ADUBACAO_CORRECAO = 'Adubação e Correção', 'Adubação e Correção'
    IRRIGACAO = 'Irrigação', 'Irrigação'
    PREPARO_SOLO = 'Preparo do Solo', 'Preparo do Solo'
    TRATAMENTO_ADICIONAL = 'Tratamento Adicional', 'Tratamento Adicional'
    TRATOS_CULTURAIS = 'Tratos Culturais', 'Tratos Culturais'
    OUTRA = 'Outra', 'Outra'


class OperacaoCampo(models.Model):
    """
    Modelo para registrar operações realizadas no campo durante a safra.
    O custo informado entra integralmente no custo da safra.
    """
    safra = models.ForeignKey(
        Safra,
        on_delete=models.CASCADE,
        related_name='operacoes',
        verbose_name='Safra'
    )
    data = models.DateField(verbose_name='Data da Operação')
    tipo = models.CharField(
        max_length=30,
        choices=TipoOperacao.choices,
        default=TipoOperacao.PLANTIO,
        verbose_name='Tipo de Operação'
    )
    detalhes = models.TextField(blank=True, default='', verbose_name='Detalhes')
    custo = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name='Custo (R$)'
    )

    class Meta:
        db_table = 'operacoes_campo'
        verbose_name = 'Operação de Campo'
        verbose_name_plural = 'Operações de Campo'
        ordering = ['-data']

    def __str__(self):
        return f"{self.tipo} - {self.safra.nome} ({self.data.strftime('%d/%m/%Y')})"


class TipoCusto(models.TextChoices):
    VARIAVEL = 'Variável', 'Variável'
    FIXO = 'Fixo', 'Fixo'


class CategoriaCustoVariavel(models.TextChoices):
    MAO_DE_OBRA = 'Mão de Obra', 'Mão de Obra'
    TRANSPORTE = 'Transporte', 'Transporte'
    ARMAZENAGEM = 'Armazenagem', 'Armazenagem'
    COMBUSTIVEL = 'Combustível', 'Combustível'
    OUTRO = 'Outro', 'Outro'


class CategoriaCustoFixo(models.TextChoices):
    IMPOSTOS = 'Impostos', 'Impostos'
    ARRENDAMENTO = 'Arrendamento', 'Arrendamento'
    SALARIOS = 'Salários', 'Salários'
    MANUTENCAO = 'Manutenção', 'Manutenção'
    OUTRO = 'Outro', 'Outro'


class Custo(models.Model):
    """
    Custo lançado pelo produtor.

    Custos variáveis pertencem a uma safra. Custos fixos (impostos, salários,
    arrendamento) não têm safra: são rateados entre as safras ativas na data
    do lançamento no cálculo dos indicadores.
    """
    safra = models.ForeignKey(
        Safra,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='custos',
        verbose_name='Safra'
    )
    data = models.DateField(verbose_name='Data')
    tipo = models.CharField(
        max_length=20,
        choices=TipoCusto.choices,
        default=TipoCusto.VARIAVEL,
        verbose_name='Tipo de Custo'
    )
    categoria = models.CharField(
        max_length=100,
        verbose_name='Categoria',
        help_text='Ex: Mão de Obra, Transporte, Impostos, Salários'
    )
    descricao = models.CharField(max_length=255, blank=True, default='', verbose_name='Descrição')
    valor = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name='Valor (R$)'
    )

    class Meta:
        db_table = 'custos'
        verbose_name = 'Custo'
        verbose_name_plural = 'Custos'
        ordering = ['-data']

    def __str__(self):
        return f"{self.categoria} - {self.descricao} (R$ {self.valor})"

    def clean(self):
        if self.tipo == TipoCusto.VARIAVEL and not self.safra_id:
            raise ValidationError({'safra': 'Custos variáveis devem ser vinculados a uma safra.'})
        if self.tipo == TipoCusto.FIXO and self.safra_id:
            raise ValidationError({'safra': 'Custos fixos não são vinculados a uma safra; eles são rateados.'})


class UnidadeColheita(models.TextChoices):
    KG = 'kg', 'Quilogramas (kg)'
    SACA = 'saca', 'Sacas (60 kg)'
    TON = 'ton', 'Toneladas (t)'


class Colheita(models.Model):
    """Registro de colheita (produção realizada) de uma safra."""
    safra = models.ForeignKey(
        Safra,
        on_delete=models.CASCADE,
        related_name='colheitas',
        verbose_name='Safra'
    )
    data = models.DateField(verbose_name='Data da Colheita')
    quantidade = models.DecimalField(max_digits=14, decimal_places=3, verbose_name='Quantidade')
    unidade = models.CharField(
        max_length=10,
        choices=UnidadeColheita.choices,
        default=UnidadeColheita.SACA,
        verbose_name='Unidade'
    )
    preco_unitario = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='Preço Unitário (R$/unidade)'
    )
    responsavel = models.CharField(max_length=100, blank=True, default='', verbose_name='Responsável')

    class Meta:
        db_table = 'colheitas'
        verbose_name = 'Colheita'
        verbose_name_plural = 'Colheitas'
        ordering = ['-data']

    def __str__(self):
        return f"{self.quantidade} {self.unidade} - {self.safra.nome}"

    @property
    def valor_total(self):
        return (self.quantidade or Decimal('0')) * (self.preco_unitario or Decimal('0'))


class Maquinario(models.Model):
    """
    Máquina ou implemento da fazenda.
    A depreciação é linear ao longo da vida útil, até o valor residual.
    """
    fazenda = models.ForeignKey(
        Fazenda,
        on_delete=models.CASCADE,
        related_name='maquinarios',
        verbose_name='Propriedade'
    )
    nome = models.CharField(max_length=100, verbose_name='Nome / Identificação')
    tipo = models.CharField(max_length=100, verbose_name='Tipo de Maquinário')
    valor_aquisicao = models.DecimalField(max_digits=14, decimal_places=2, verbose_name='Valor de Aquisição (R$)')
    data_aquisicao = models.DateField(verbose_name='Data de Aquisição')
    vida_util_anos = models.PositiveIntegerField(default=10, verbose_name='Vida Útil (anos)')
    valor_residual_percentual = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=0,
        verbose_name='Valor Residual (%)'
    )

    class Meta:
        db_table = 'maquinarios'
        verbose_name = 'Maquinário'
        verbose_name_plural = 'Maquinários'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.tipo})"

    @property
    def valor_residual(self):
        """Valor Residual = Valor de Aquisição x Percentual Residual / 100."""
        return self.valor_aquisicao * (self.valor_residual_percentual / Decimal('100'))

    @property
    def depreciacao_anual(self):
        """Depreciação Anual = (Valor de Aquisição - Valor Residual) / Vida Útil."""
        if not self.vida_util_anos or self.vida_util_anos <= 0:
            return Decimal('0.00')
        return (self.valor_aquisicao - self.valor_residual) / Decimal(self.vida_util_anos)


class Benfeitoria(models.Model):
    """Benfeitoria (silo, galpão, etc.) paga em parcelas."""
    fazenda = models.ForeignKey(
        Fazenda,
        on_delete=models.CASCADE,
        related_name='benfeitorias',
        verbose_name='Propriedade'
    )
    nome = models.CharField(max_length=100, verbose_name='Nome da Benfeitoria')
    valor_total = models.DecimalField(max_digits=14, decimal_places=2, default=0, verbose_name='Valor Total (R$)')
    parcelas_pagas = models.PositiveIntegerField(default=0, verbose_name='Parcelas Pagas')
    parcelas_total = models.PositiveIntegerField(default=1, verbose_name='Total de Parcelas')
    data_inicio_pagamento = models.DateField(verbose_name='Início do Pagamento')

    class Meta:
        db_table = 'benfeitorias'
        verbose_name = 'Benfeitoria'
        verbose_name_plural = 'Benfeitorias'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.parcelas_pagas}/{self.parcelas_total})"

    def clean(self):
        if self.parcelas_pagas is not None and self.parcelas_total is not None \
                and self.parcelas_pagas > self.parcelas_total:
            raise ValidationError({'parcelas_pagas': 'Parcelas pagas não podem exceder o total de parcelas.'})

    @property
    def valor_parcela(self):
        if not self.parcelas_total or self.parcelas_total <= 0:
            return Decimal('0.00')
        return self.valor_total / Decimal(self.parcelas_total)

    @property
    def saldo_devedor(self):
        """Saldo = parcelas restantes x valor da parcela."""
        restantes = (self.parcelas_total or 0) - (self.parcelas_pagas or 0)
        return Decimal(restantes) * self.valor_parcela
