import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=255)),
                ('empresa', models.CharField(blank=True, max_length=100, null=True)),
                ('whatsapp', models.CharField(blank=True, max_length=20)),
                ('mensagem', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('new', 'Novo'), ('contacted', 'Contatado'), ('meeting', 'Reunião'), ('proposal', 'Proposta'), ('closed_won', 'Fechado ✓'), ('closed_lost', 'Perdido')], db_index=True, default='new', max_length=20)),
                ('origem', models.CharField(choices=[('contato', 'Formulário de contato'), ('diagnostico', 'Diagnóstico com IA'), ('manual', 'Cadastro manual')], default='contato', max_length=20)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'lead',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.CreateModel(
            name='MovimentacaoLead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status_anterior', models.CharField(choices=[('new', 'Novo'), ('contacted', 'Contatado'), ('meeting', 'Reunião'), ('proposal', 'Proposta'), ('closed_won', 'Fechado ✓'), ('closed_lost', 'Perdido')], max_length=20)),
                ('status_novo', models.CharField(choices=[('new', 'Novo'), ('contacted', 'Contatado'), ('meeting', 'Reunião'), ('proposal', 'Proposta'), ('closed_won', 'Fechado ✓'), ('closed_lost', 'Perdido')], max_length=20)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('lead', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='movimentacoes', to='crm.lead')),
                ('usuario', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='movimentacoes_lead', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'movimentacao_lead',
                'ordering': ['-criado_em'],
            },
        ),
    ]
