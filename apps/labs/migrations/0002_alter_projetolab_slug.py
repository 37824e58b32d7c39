from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('labs', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='projetolab',
            name='slug',
            field=models.CharField(error_messages={'unique': 'Erro ao cadastrar. Verifique se o Slug já existe.'}, max_length=150, unique=True),
        ),
    ]
