"""
Main application entry point for the Invoice Dashboard
"""

import os
import click
from werkzeug.security import generate_password_hash

from dashboard import create_app, db, schemas
from dashboard.config import config
from dashboard.models import User, Customer, Invoice

# Create Flask application
app = create_app(config[os.environ.get('FLASK_CONFIG', 'default')])

@app.shell_context_processor
def make_shell_context():
    """Make database models available in Flask shell."""
    return {
        'db': db,
        'User': User,
        'Customer': Customer,
        'Invoice': Invoice
    }

@app.cli.command()
def init_db():
    """Initialize the database."""
    db.create_all()
    click.echo("Database initialized successfully!")

@app.cli.command()
@click.option('--name', prompt='Name')
@click.option('--email', prompt='Email')
@click.password_option()
def create_admin(name, email, password):
    """Create a dashboard user."""
    result = schemas.validate('CreateUser', {'name': name, 'email': email, 'password': password})
    if not result.success:
        field, messages = next(iter(result.errors.items()))
        raise click.BadParameter(' '.join(messages), param_hint=field)

    user = User(
        name=result.data.name,
        email=result.data.email,
        password_hash=generate_password_hash(password, method=app.config['PASSWORD_HASH_METHOD'])
    )
    db.session.add(user)
    db.session.commit()

    click.echo(f"User created successfully: {user.email}")

if __name__ == '__main__':
    # Development server
    app.run(host='0.0.0.0', port=5000, debug=True)
