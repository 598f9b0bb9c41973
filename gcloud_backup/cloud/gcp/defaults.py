"""
Default values for the Google Cloud SDK and Compute Engine API.

Note on credentials:
- The Google Cloud SDK keeps one credential file per authenticated account
  under <config dir>/legacy_credentials/<account>/adc.json
- The config dir can be moved with the CLOUDSDK_CONFIG environment variable
"""

CLOUDSDK_CONFIG_ENV = "CLOUDSDK_CONFIG"
CLOUDSDK_CONFIG_DIRNAME = "gcloud"
LEGACY_CREDENTIALS_DIR = "legacy_credentials"
ADC_FILENAME = "adc.json"

# Requested for service accounts only; user credentials keep the scopes
# granted at `gcloud auth login`
COMPUTE_SCOPES = ["https://www.googleapis.com/auth/compute.readonly"]

# Credential file "type" values written by gcloud
AUTHORIZED_USER_TYPE = "authorized_user"
SERVICE_ACCOUNT_TYPE = "service_account"
