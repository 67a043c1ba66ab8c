"""Reserved condition keys and well-known metadata keys."""

# Reserved condition keys
NAME = "name"
KEYWORD = "keyword"
LABEL = "label"
ANNOTATION = "annotation"
USER_FACING = "userfacing"

# Order-by fields
CREATE_TIME = "createTime"

# Metadata keys
DISPLAY_NAME_ANNOTATION_KEY = "kubesphere.io/alias-name"
CREATOR_ANNOTATION_KEY = "kubesphere.io/creator"
WORKSPACE_LABEL_KEY = "kubesphere.io/workspace"

# Value that enables boolean match keys such as ``userfacing``
TRUE = "true"

NAME_SEPARATOR = "|"
