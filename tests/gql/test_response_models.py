from repopilot.gql.models import MutationResponse, QueryResponse


def test_query_response_defaults_to_absent_fields() -> None:
    response = QueryResponse.model_validate({})

    assert response.echo is None
    assert response.project is None


def test_query_response_reads_camel_case_fields() -> None:
    response = QueryResponse.model_validate(
        {"project": {"mergeRequests": {"nodes": [{"webUrl": "u", "iid": "7"}]}}, "extra": 1}
    )

    assert response.project is not None
    assert response.project.merge_requests is not None
    assert response.project.merge_requests.nodes is not None
    assert response.project.merge_requests.nodes[0] is not None
    assert response.project.merge_requests.nodes[0].web_url == "u"


def test_mutation_response_maps_every_payload() -> None:
    response = MutationResponse.model_validate(
        {
            "createBranch": {"errors": ["a"]},
            "create": {"errors": ["b"]},
            "commitCreate": {"errors": ["c"]},
            "mergeRequestCreate": {"errors": ["d"]},
            "echoCreate": {"errors": [], "echoes": ["e"]},
        }
    )

    assert response.create_branch is not None and response.create_branch.errors == ["a"]
    assert response.create is not None and response.create.errors == ["b"]
    assert response.commit_create is not None and response.commit_create.errors == ["c"]
    assert response.merge_request_create is not None and response.merge_request_create.errors == ["d"]
    assert response.echo_create is not None and response.echo_create.echoes == ["e"]


def test_models_accept_field_names() -> None:
    response = MutationResponse(create_branch={"errors": []})

    assert response.create_branch is not None
    assert response.create_branch.errors == []
