from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ProjetoLab',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(max_length=150)),
                ('slug', models.SlugField(error_messages={'unique': 'Erro ao cadastrar. Verifique se o Slug já existe.'}, max_length=150, unique=True)),
                ('descricao', models.TextField(blank=True)),
                ('categoria', models.CharField(default='SaaS Interno', max_length=100)),
                ('status', models.CharField(default='Em Desenvolvimento', max_length=100)),
                ('url_externa', models.URLField(max_length=500)),
                ('icone', models.CharField(blank=True, max_length=50)),
                ('stack', models.JSONField(blank=True, default=list)),
                ('ativo', models.BooleanField(db_index=True, default=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Projeto do Labs',
                'verbose_name_plural': 'Projetos do Labs',
                'db_table': 'projeto_lab',
                'ordering': ['-criado_em'],
            },
        ),
    ]
