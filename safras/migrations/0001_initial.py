from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Fazenda',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100, verbose_name='Nome da Propriedade')),
                ('localizacao', models.CharField(max_length=200, verbose_name='Localização (Município/UF)')),
                ('produtor', models.CharField(blank=True, max_length=200, null=True, verbose_name='Nome do Produtor')),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True, verbose_name='Latitude')),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True, verbose_name='Longitude')),
            ],
            options={
                'verbose_name': 'Fazenda',
                'verbose_name_plural': 'Fazendas',
                'db_table': 'fazendas',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Safra',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100, verbose_name='Nome da Safra (Ex: Soja Verão 23/24)')),
                ('cultura', models.CharField(help_text='Ex: Soja, Milho, Trigo', max_length=100, verbose_name='Cultura')),
                ('variedade', models.CharField(max_length=100, verbose_name='Variedade')),
                ('area', models.DecimalField(decimal_places=4, default=0, max_digits=10, verbose_name='Área (ha)')),
                ('data_inicio', models.DateField(verbose_name='Data de Início')),
                ('data_fim', models.DateField(blank=True, null=True, verbose_name='Data de Término')),
                ('ativa', models.BooleanField(default=True, verbose_name='Safra Ativa?')),
                ('fazenda', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='safras', to='safras.fazenda', verbose_name='Fazenda')),
            ],
            options={
                'verbose_name': 'Safra',
                'verbose_name_plural': 'Safras',
                'db_table': 'safras',
                'ordering': ['-data_inicio'],
            },
        ),
        migrations.CreateModel(
            name='AnaliseSolo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('ph', models.DecimalField(decimal_places=2, max_digits=5, verbose_name='pH em H₂O')),
                ('fosforo', models.DecimalField(decimal_places=2, max_digits=8, verbose_name='Fósforo (P) (mg/dm³)')),
                ('potassio', models.DecimalField(decimal_places=2, max_digits=8, verbose_name='Potássio (K) (mg/dm³)')),
                ('materia_organica', models.DecimalField(decimal_places=2, max_digits=6, verbose_name='M.O. (%)')),
                ('calcio', models.DecimalField(decimal_places=2, max_digits=8, verbose_name='Cálcio (Ca) (cmolc/dm³)')),
                ('magnesio', models.DecimalField(decimal_places=2, max_digits=8, verbose_name='Magnésio (Mg) (cmolc/dm³)')),
                ('aluminio', models.DecimalField(decimal_places=2, max_digits=8, verbose_name='Alumínio (Al) (cmolc/dm³)')),
                ('saturacao_bases', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True, verbose_name='Sat. Bases (V%)')),
                ('saturacao_aluminio', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True, verbose_name='Sat. Alumínio (m%)')),
                ('ctc', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='CTC (cmolc/dm³)')),
                ('enxofre', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Enxofre (S) (mg/dm³)')),
                ('boro', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Boro (B) (mg/dm³)')),
                ('cobre', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Cobre (Cu) (mg/dm³)')),
                ('ferro', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Ferro (Fe) (mg/dm³)')),
                ('manganes', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Manganês (Mn) (mg/dm³)')),
                ('zinco', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, verbose_name='Zinco (Zn) (mg/dm³)')),
                ('safra', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='analise_solo', to='safras.safra', verbose_name='Safra')),
            ],
            options={
                'verbose_name': 'Análise de Solo',
                'verbose_name_plural': 'Análises de Solo',
                'db_table': 'analises_solo',
            },
        ),
        migrations.CreateModel(
            name='OperacaoCampo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('data', models.DateField(verbose_name='Data da Operação')),
                ('tipo', models.CharField(choices=[('Plantio', 'Plantio'), ('Defensivo', 'Defensivo'), ('Adubação e Correção', 'Adubação e Correção'), ('Irrigação', 'Irrigação'), ('Preparo do Solo', 'Preparo do Solo'), ('Tratamento Adicional', 'Tratamento Adicional'), ('Tratos Culturais', 'Tratos Culturais'), ('Outra', 'Outra')], default='Plantio', max_length=30, verbose_name='Tipo de Operação')),
                ('detalhes', models.TextField(blank=True, default='', verbose_name='Detalhes')),
                ('custo', models.DecimalField(decimal_places=2, default=0, max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Custo (R$)')),
                ('safra', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='operacoes', to='safras.safra', verbose_name='Safra')),
            ],
            options={
                'verbose_name': 'Operação de Campo',
                'verbose_name_plural': 'Operações de Campo',
                'db_table': 'operacoes_campo',
                'ordering': ['-data'],
            },
        ),
        migrations.CreateModel(
            name='Custo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('data', models.DateField(verbose_name='Data')),
                ('tipo', models.CharField(choices=[('Variável', 'Variável'), ('Fixo', 'Fixo')], default='Variável', max_length=20, verbose_name='Tipo de Custo')),
                ('categoria', models.CharField(help_text='Ex: Mão de Obra, Transporte, Impostos, Salários', max_length=100, verbose_name='Categoria')),
                ('descricao', models.CharField(blank=True, default='', max_length=255, verbose_name='Descrição')),
                ('valor', models.DecimalField(decimal_places=2, default=0, max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Valor (R$)')),
                ('safra', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='custos', to='safras.safra', verbose_name='Safra')),
            ],
            options={
                'verbose_name': 'Custo',
                'verbose_name_plural': 'Custos',
                'db_table': 'custos',
                'ordering': ['-data'],
            },
        ),
        migrations.CreateModel(
            name='Colheita',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('data', models.DateField(verbose_name='Data da Colheita')),
                ('quantidade', models.DecimalField(decimal_places=3, max_digits=14, verbose_name='Quantidade')),
                ('unidade', models.CharField(choices=[('kg', 'Quilogramas (kg)'), ('saca', 'Sacas (60 kg)'), ('ton', 'Toneladas (t)')], default='saca', max_length=10, verbose_name='Unidade')),
                ('preco_unitario', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Preço Unitário (R$/unidade)')),
                ('responsavel', models.CharField(blank=True, default='', max_length=100, verbose_name='Responsável')),
                ('safra', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='colheitas', to='safras.safra', verbose_name='Safra')),
            ],
            options={
                'verbose_name': 'Colheita',
                'verbose_name_plural': 'Colheitas',
                'db_table': 'colheitas',
                'ordering': ['-data'],
            },
        ),
        migrations.CreateModel(
            name='Maquinario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100, verbose_name='Nome / Identificação')),
                ('tipo', models.CharField(max_length=100, verbose_name='Tipo de Maquinário')),
                ('valor_aquisicao', models.DecimalField(decimal_places=2, max_digits=14, verbose_name='Valor de Aquisição (R$)')),
                ('data_aquisicao', models.DateField(verbose_name='Data de Aquisição')),
                ('vida_util_anos', models.PositiveIntegerField(default=10, verbose_name='Vida Útil (anos)')),
                ('valor_residual_percentual', models.DecimalField(decimal_places=2, default=0, max_digits=5, verbose_name='Valor Residual (%)')),
                ('fazenda', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='maquinarios', to='safras.fazenda', verbose_name='Propriedade')),
            ],
            options={
                'verbose_name': 'Maquinário',
                'verbose_name_plural': 'Maquinários',
                'db_table': 'maquinarios',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Benfeitoria',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100, verbose_name='Nome da Benfeitoria')),
                ('valor_total', models.DecimalField(decimal_places=2, default=0, max_digits=14, verbose_name='Valor Total (R$)')),
                ('parcelas_pagas', models.PositiveIntegerField(default=0, verbose_name='Parcelas Pagas')),
                ('parcelas_total', models.PositiveIntegerField(default=1, verbose_name='Total de Parcelas')),
                ('data_inicio_pagamento', models.DateField(verbose_name='Início do Pagamento')),
                ('fazenda', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='benfeitorias', to='safras.fazenda', verbose_name='Propriedade')),
            ],
            options={
                'verbose_name': 'Benfeitoria',
                'verbose_name_plural': 'Benfeitorias',
                'db_table': 'benfeitorias',
                'ordering': ['nome'],
            },
        ),
    ]
