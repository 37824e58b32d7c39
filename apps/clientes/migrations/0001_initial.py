import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('crm', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Cliente',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100)),
                ('empresa', models.CharField(max_length=100)),
                ('logo_url', models.URLField(blank=True, max_length=500)),
                ('valor_mensal', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('status', models.CharField(choices=[('active', 'Ativo'), ('churned', 'Churned'), ('paused', 'Pausado')], db_index=True, default='active', max_length=20)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('lead', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='cliente', to='crm.lead')),
            ],
            options={
                'db_table': 'cliente',
                'ordering': ['-criado_em'],
            },
        ),
    ]
