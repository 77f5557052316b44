import logging
import os
from dotenv import load_dotenv

# Load environment variables before the config class reads them
load_dotenv()

from btcpos import create_app, db
from btcpos.services.seed_service import seed_demo_data, DEMO_PASSWORD

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO'),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)

# Create app instance
app = create_app()


@app.cli.command()
def init_db():
    """Initialize database"""
    db.create_all()
    print('Database initialized successfully!')


@app.cli.command()
def drop_db():
    """Drop all tables"""
    if input('Are you sure you want to drop all tables? (yes/no): ') == 'yes':
        db.drop_all()
        print('Database dropped successfully!')
    else:
        print('Operation cancelled')


@app.cli.command()
def seed():
    """Create the demo vendor, products and customer"""
    vendor, customer = seed_demo_data()
    print('Seeding completed!')
    print(f'Vendor: {vendor.email} | Password: {DEMO_PASSWORD}')
    print(f'Customer: {customer.email} | Password: {DEMO_PASSWORD}')


if __name__ == '__main__':
    app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 5000)),
        debug=os.getenv('DEBUG', 'True') == 'True'
    )
