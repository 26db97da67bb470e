"""
Configuration settings for the G-DAX diagnosis engine
"""

import os


class Config:
    """Base configuration"""
    # App
    APP_NAME = "G-DAX Industry & Job Transition Diagnosis"
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Reports
    REPORT_BASE_URL = os.environ.get('REPORT_BASE_URL', 'http://localhost:8787')
    DIAGNOSIS_DATE_FORMAT = os.environ.get('DIAGNOSIS_DATE_FORMAT', '%Y-%m-%d')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    # Report links in notifications must point at the public site
    REPORT_BASE_URL = os.environ.get('REPORT_BASE_URL')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_LEVEL = 'WARNING'
    REPORT_BASE_URL = 'https://diagnosis.example.org'


# Config mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get config based on environment"""
    env = os.environ.get('GDAX_ENV', 'development')
    return config.get(env, config['default'])
