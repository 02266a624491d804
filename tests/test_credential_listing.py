import pytest

URL = '/api/user/credentials/'


@pytest.fixture
def three_credentials(user, make_competition, make_credential):
    return [
        make_credential(user, make_competition(name=f'Con {i}'), order=i)
        for i in range(1, 4)
    ]


def _listed_ids(client):
    response = client.get(URL)
    assert response.status_code == 200
    return [c['id'] for c in response.json()['credentials']]


# =============================================================================
# Listing
# =============================================================================

@pytest.mark.django_db
def test_list_is_ordered_and_scoped_to_owner(user_client, other_user, three_credentials, competition, make_credential):
    make_credential(other_user, competition)
    first, second, third = three_credentials

    assert _listed_ids(user_client) == [first.pk, second.pk, third.pk]


@pytest.mark.django_db
def test_same_order_falls_back_to_newest_first(user_client, user, make_competition, make_credential):
    older = make_credential(user, make_competition(name='Older Con'), order=0)
    newer = make_credential(user, make_competition(name='Newer Con'), order=0)

    assert _listed_ids(user_client) == [newer.pk, older.pk]


@pytest.mark.django_db
def test_retrieve_own_credential(user_client, user, competition, make_credential):
    credential = make_credential(user, competition)

    response = user_client.get(f'{URL}{credential.pk}/')

    assert response.status_code == 200
    assert response.json()['credential']['id'] == credential.pk


@pytest.mark.django_db
def test_retrieve_foreign_credential_is_forbidden(user_client, other_user, competition, make_credential):
    credential = make_credential(other_user, competition)

    response = user_client.get(f'{URL}{credential.pk}/')

    assert response.status_code == 403


@pytest.mark.django_db
def test_retrieve_unknown_credential(user_client):
    response = user_client.get(f'{URL}424242/')

    assert response.status_code == 404
    assert response.json() == {'error': 'Credential not found'}


@pytest.mark.django_db
def test_get_credential_for_competition(user_client, user, competition, make_competition, make_credential):
    credential = make_credential(user, competition)

    response = user_client.get(f'{URL}competition/{competition.pk}/')
    assert response.status_code == 200
    assert response.json()['credential']['id'] == credential.pk

    other = make_competition(name='Not joined')
    assert user_client.get(f'{URL}competition/{other.pk}/').status_code == 404


# =============================================================================
# Reorder
# =============================================================================

@pytest.mark.django_db
def test_reorder_changes_listing(user_client, three_credentials):
    first, second, third = three_credentials

    response = user_client.put(f'{URL}reorder/', {'credentials': [
        {'id': third.pk, 'order': 0},
        {'id': first.pk, 'order': 1},
        {'id': second.pk, 'order': 2},
    ]}, format='json')

    assert response.status_code == 200
    assert response.json()['updatedCount'] == 3
    assert _listed_ids(user_client) == [third.pk, first.pk, second.pk]


@pytest.mark.django_db
def test_reorder_without_order_uses_list_position(user_client, three_credentials):
    first, second, third = three_credentials

    response = user_client.put(f'{URL}reorder/', {'credentials': [
        {'id': second.pk},
        {'id': third.pk},
        {'id': first.pk},
    ]}, format='json')

    assert response.status_code == 200
    assert _listed_ids(user_client) == [second.pk, third.pk, first.pk]


@pytest.mark.django_db
def test_reorder_with_foreign_credential_changes_nothing(
        user_client, other_user, three_credentials, make_competition, make_credential):
    first, second, third = three_credentials
    foreign = make_credential(other_user, make_competition(name='Elsewhere'), order=7)

    response = user_client.put(f'{URL}reorder/', {'credentials': [
        {'id': third.pk, 'order': 0},
        {'id': foreign.pk, 'order': 1},
    ]}, format='json')

    assert response.status_code == 403
    assert response.json()['error'] == 'Some credentials do not belong to you'
    third.refresh_from_db()
    foreign.refresh_from_db()
    assert third.order == 3
    assert foreign.order == 7


@pytest.mark.django_db
@pytest.mark.parametrize('payload', [
    {'credentials': []},
    {},
    {'credentials': 'nope'},
])
def test_reorder_rejects_malformed_payload(user_client, payload):
    response = user_client.put(f'{URL}reorder/', payload, format='json')

    assert response.status_code == 400
    assert 'credentials' in response.json()['details']


@pytest.mark.django_db
def test_reorder_rejects_duplicate_ids(user_client, three_credentials):
    first = three_credentials[0]

    response = user_client.put(f'{URL}reorder/', {'credentials': [
        {'id': first.pk, 'order': 0},
        {'id': first.pk, 'order': 1},
    ]}, format='json')

    assert response.status_code == 400
