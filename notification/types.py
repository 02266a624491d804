# 通知类型，存入 Notification.data['notification_type']
PARTICIPANT_SUBMITTED = 'PARTICIPANT_SUBMITTED'
PARTICIPANT_APPROVED = 'PARTICIPANT_APPROVED'
PARTICIPANT_REJECTED = 'PARTICIPANT_REJECTED'
CREDENTIAL_DELETED = 'CREDENTIAL_DELETED'
COMPETITION_SUBMITTED = 'COMPETITION_SUBMITTED'
COMPETITION_SUBMISSION = 'COMPETITION_SUBMISSION'
COMPETITION_ACCEPTED = 'COMPETITION_ACCEPTED'
COMPETITION_REJECTED = 'COMPETITION_REJECTED'
BADGE_AWARDED = 'BADGE_AWARDED'
