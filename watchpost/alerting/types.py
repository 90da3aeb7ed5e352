"""Closed set of alert provider kinds."""

from enum import Enum


class AlertType(str, Enum):
    """Type of an alert, named after the provider that dispatches it."""
    ALERTMANAGER = "alertmanager"
    AWS_SES = "aws-ses"
    CLICKUP = "clickup"
    CUSTOM = "custom"
    DATADOG = "datadog"
    DISCORD = "discord"
    EMAIL = "email"
    GITEA = "gitea"
    GITHUB = "github"
    GITLAB = "gitlab"
    GOOGLE_CHAT = "googlechat"
    GOTIFY = "gotify"
    HOME_ASSISTANT = "homeassistant"
    IFTTT = "ifttt"
    ILERT = "ilert"
    INCIDENT_IO = "incident-io"
    JETBRAINS_SPACE = "jetbrainsspace"
    LINE = "line"
    MATRIX = "matrix"
    MATTERMOST = "mattermost"
    MESSAGEBIRD = "messagebird"
    N8N = "n8n"
    NEW_RELIC = "newrelic"
    NTFY = "ntfy"
    OPSGENIE = "opsgenie"
    PAGERDUTY = "pagerduty"
    PLIVO = "plivo"
    PUSHOVER = "pushover"
    ROCKETCHAT = "rocketchat"
    SENDGRID = "sendgrid"
    SIGNAL = "signal"
    SIGNL4 = "signl4"
    SLACK = "slack"
    SPLUNK = "splunk"
    SQUADCAST = "squadcast"
    TEAMS = "teams"
    TEAMS_WORKFLOWS = "teams-workflows"
    TELEGRAM = "telegram"
    THREEMA_GATEWAY = "threemagateway"
    TWILIO = "twilio"
    VONAGE = "vonage"
    WEBEX = "webex"
    ZAPIER = "zapier"
    ZULIP = "zulip"
