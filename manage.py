#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Pevetech - Site institucional e back-office
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Atalhos do projeto
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # Primeira execução: banco, estáticos e dados de demonstração
        if command == 'setup':
            print("🚀 Configurando Pevetech...")

            print("📊 Aplicando migrações...")
            if os.system('python manage.py migrate') != 0:
                print("❌ Erro nas migrações")
                return

            print("📁 Coletando arquivos estáticos...")
            os.system('python manage.py collectstatic --noinput')

            print("🌱 Criando dados de demonstração...")
            if os.system('python manage.py seed') == 0:
                print("✅ Setup concluído!")
                print("🔑 Acesse /login/ com: admin / pevetech123")
            else:
                print("⚠️  Setup parcial concluído (sem dados demo)")
            return

        elif command == 'setup-db':
            print("🐘 Configurando PostgreSQL...")

            commands = [
                "CREATE USER pevetech_user WITH PASSWORD 'pevetech123';",
                "CREATE DATABASE pevetech OWNER pevetech_user;",
                "GRANT ALL PRIVILEGES ON DATABASE pevetech TO pevetech_user;",
                "ALTER USER pevetech_user CREATEDB;"
            ]

            for cmd in commands:
                print(f"Executando: {cmd}")
                if os.system(f'psql -U postgres -h localhost -c "{cmd}"') != 0:
                    print("⚠️  Comando pode ter falhado (normal se já existir)")

            if os.system('psql -U pevetech_user -h localhost -d pevetech -c "SELECT version();"') == 0:
                print("✅ PostgreSQL configurado! Execute agora: python manage.py setup")
            else:
                print("❌ Erro na configuração. Verifique se o PostgreSQL está rodando e o psql no PATH.")
            return

        elif command == 'reset':
            confirm = input("⚠️  Isso irá apagar TODOS os dados. Continuar? (y/N): ")
            if confirm.lower() == 'y':
                print("🗑️  Resetando banco de dados...")
                os.system('python manage.py flush --noinput')
                os.system('python manage.py migrate')
                os.system('python manage.py seed')
                print("✅ Reset concluído!")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
