"""GraphQL operation documents for the GitLab endpoint.

Caller values are always bound through variables, never interpolated.
"""

READ_ECHO = """
query ECHO($message: String!) {
  echo(text: $message)
}
"""

WRITE_ECHO = """
mutation ECHO($message: String!) {
  echoCreate(input: {errors: [], messages: [$message]}) {
    echoes
  }
}
"""

CREATE_BRANCH = """
mutation CREATE_BRANCH($projectPath: ID!, $branchName: String!, $ref: String!) {
  createBranch(input: {projectPath: $projectPath, name: $branchName, ref: $ref}) {
    errors
  }
}
"""

CREATE_FILE = """
mutation CREATE_FILE(
  $projectPath: ID!,
  $branchName: String!,
  $createMessage: String!,
  $updateMessage: String!,
  $filePath: String!,
  $fileContent: String!,
  $create: Boolean!
) {
  create: commitCreate(input: {
    projectPath: $projectPath,
    branch: $branchName,
    message: $createMessage,
    actions: [{action: CREATE, filePath: $filePath}]
  }) @include(if: $create) {
    errors
  }
  commitCreate(input: {
    projectPath: $projectPath,
    branch: $branchName,
    message: $updateMessage,
    actions: [{action: UPDATE, filePath: $filePath, content: $fileContent}]
  }) {
    errors
  }
}
"""

CREATE_MERGE_REQUEST = """
mutation CREATE_MERGE($projectPath: ID!, $sourceBranch: String!, $targetBranch: String!, $title: String!) {
  mergeRequestCreate(input: {
    projectPath: $projectPath,
    title: $title,
    sourceBranch: $sourceBranch,
    targetBranch: $targetBranch
  }) {
    errors
  }
}
"""

OPEN_MERGE_REQUESTS = """
query OPEN_MERGE_REQUESTS($projectPath: ID!, $sourceBranch: String!) {
  project(fullPath: $projectPath) {
    mergeRequests(state: opened, sourceBranches: [$sourceBranch], first: 1) {
      nodes {
        webUrl
      }
    }
  }
}
"""
